"""Descriptors for the blocks that make up a settings page."""

from __future__ import annotations

from dataclasses import dataclass

SECTION_ARIA_LABEL = "settings-section"
EXTENSION_ARIA_LABEL = "extension-setting-element"
EXTENSION_ICON = "beaker"


@dataclass(frozen=True, slots=True)
class SettingSection:
	"""A labelled settings row with an optional control area."""

	label: str
	description: str
	no_border: bool = False
	has_children: bool = True

	@property
	def css_class(self) -> str:
		classes = ["settings-section", "disable-select"]
		if self.no_border:
			classes.append("no-border")
		return " ".join(classes)

	@property
	def aria_label(self) -> str:
		return SECTION_ARIA_LABEL

	@property
	def shows_control(self) -> bool:
		return self.has_children


@dataclass(frozen=True, slots=True)
class SettingSectionSimple:
	"""A settings row with only a control area."""

	has_children: bool = True

	@property
	def css_class(self) -> str:
		return "settings-section simple disable-select"

	@property
	def aria_label(self) -> str:
		return SECTION_ARIA_LABEL

	@property
	def shows_control(self) -> bool:
		return self.has_children


@dataclass(frozen=True, slots=True)
class ExtensionSetting:
	"""Card describing an installed extension."""

	title: str
	author: str
	description: str

	@property
	def css_class(self) -> str:
		return "extension-setting"

	@property
	def aria_label(self) -> str:
		return EXTENSION_ARIA_LABEL

	@property
	def icon(self) -> str:
		return EXTENSION_ICON

	@property
	def shows_control(self) -> bool:
		return True
