"""Validation rules for the generic text input and the group rename field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from chatview.obs import metrics as obs_metrics

GROUP_NAME_MAX_LENGTH = 64
GROUP_NAME_MIN_LENGTH = 0
GROUP_NAME_SPECIAL_CHARS = frozenset(" .,!?_&+~(){}[]-/*")

ERROR_TOO_LONG = "too_long"
ERROR_TOO_SHORT = "too_short"
ERROR_WHITESPACE = "whitespace"
ERROR_SPECIAL_CHARS = "special_chars"
ERROR_NOT_ALPHANUMERIC = "not_alphanumeric"


class SpecialCharsAction(str, Enum):
	ALLOW = "allow"
	DENY = "deny"


@dataclass(frozen=True, slots=True)
class Validation:
	"""Rules the text input enforces on every change."""

	max_length: Optional[int] = None
	min_length: Optional[int] = None
	alpha_numeric_only: bool = False
	no_whitespace: bool = False
	# Validation is shared by every input; set this to let colons through the character checks.
	ignore_colons: bool = False
	special_chars: Optional[Tuple[SpecialCharsAction, FrozenSet[str]]] = None


@dataclass(frozen=True, slots=True)
class InputOptions:
	"""Configuration for one generic text input."""

	with_validation: Optional[Validation] = None
	clear_on_submit: bool = True
	clear_validation_on_submit: bool = False
	react_to_esc_key: bool = False
	with_clear_btn: bool = False


def build_group_rename_validation() -> Validation:
	return Validation(
		max_length=GROUP_NAME_MAX_LENGTH,
		min_length=GROUP_NAME_MIN_LENGTH,
		alpha_numeric_only=True,
		no_whitespace=False,
		ignore_colons=False,
		special_chars=(SpecialCharsAction.ALLOW, GROUP_NAME_SPECIAL_CHARS),
	)


def get_input_options() -> InputOptions:
	"""Options for the group rename input: keep the text, drop stale errors on submit."""
	return InputOptions(
		with_validation=build_group_rename_validation(),
		clear_on_submit=False,
		clear_validation_on_submit=True,
	)


def _check_char(char: str, validation: Validation) -> Optional[str]:
	if char == ":" and validation.ignore_colons:
		return None
	if char.isspace() and validation.no_whitespace:
		return ERROR_WHITESPACE
	action, chars = validation.special_chars or (None, frozenset())
	if action == SpecialCharsAction.DENY and char in chars:
		return ERROR_SPECIAL_CHARS
	if not validation.alpha_numeric_only or char.isalnum():
		return None
	if action == SpecialCharsAction.ALLOW and char in chars:
		return None
	return ERROR_NOT_ALPHANUMERIC


def validate_input(text: str, validation: Validation) -> List[str]:
	"""Return the error keys ``text`` violates, in a stable order. Empty means accepted."""
	errors: List[str] = []
	if validation.max_length is not None and len(text) > validation.max_length:
		errors.append(ERROR_TOO_LONG)
	if validation.min_length is not None and len(text) < validation.min_length:
		errors.append(ERROR_TOO_SHORT)
	for char in text:
		error = _check_char(char, validation)
		if error is not None and error not in errors:
			errors.append(error)
	for error in errors:
		obs_metrics.inc_input_rejection(error)
	return errors


def is_valid(text: str, validation: Validation) -> bool:
	return not validate_input(text, validation)
