"""Text input configuration exports."""

from .validation import (
	InputOptions,
	SpecialCharsAction,
	Validation,
	build_group_rename_validation,
	get_input_options,
	is_valid,
	validate_input,
)

__all__ = [
	"InputOptions",
	"SpecialCharsAction",
	"Validation",
	"build_group_rename_validation",
	"get_input_options",
	"is_valid",
	"validate_input",
]
