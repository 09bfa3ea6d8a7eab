import pytest

from chatview.domain.inputs import (
    SpecialCharsAction,
    Validation,
    build_group_rename_validation,
    get_input_options,
    is_valid,
    validate_input,
)


def test_group_rename_policy_fields():
    validation = build_group_rename_validation()
    assert validation.max_length == 64
    assert validation.min_length == 0
    assert validation.alpha_numeric_only is True
    assert validation.no_whitespace is False
    assert validation.ignore_colons is False
    action, chars = validation.special_chars
    assert action is SpecialCharsAction.ALLOW
    assert chars == frozenset(" .,!?_&+~(){}[]-/*")


def test_group_rename_policy_is_built_fresh():
    assert build_group_rename_validation() is not build_group_rename_validation()


def test_input_options_submit_behaviour():
    options = get_input_options()
    assert options.with_validation == build_group_rename_validation()
    assert options.clear_on_submit is False
    assert options.clear_validation_on_submit is True


@pytest.mark.parametrize(
    "text",
    ["", "Weekend crew", "Plans (v2) - final!", "a" * 64, "Café", "x_y&z+1~[ok]{ok}/*?,."],
)
def test_group_rename_accepts(text):
    assert is_valid(text, build_group_rename_validation())


def test_group_rename_rejects_too_long():
    assert validate_input("a" * 65, build_group_rename_validation()) == ["too_long"]


@pytest.mark.parametrize("text", ["#general", "chat:room", "tab\there", "50%"])
def test_group_rename_rejects_unlisted_characters(text):
    assert validate_input(text, build_group_rename_validation()) == ["not_alphanumeric"]


def test_errors_are_not_repeated():
    errors = validate_input("#" * 70, build_group_rename_validation())
    assert errors == ["too_long", "not_alphanumeric"]


def test_min_length_and_whitespace():
    validation = Validation(min_length=3, no_whitespace=True)
    assert validate_input("a b", validation) == ["whitespace"]
    assert validate_input("ab", validation) == ["too_short"]


def test_ignore_colons():
    validation = Validation(alpha_numeric_only=True, ignore_colons=True)
    assert is_valid("did:key:abc", validation)


def test_denied_special_chars():
    validation = Validation(special_chars=(SpecialCharsAction.DENY, frozenset("<>")))
    assert validate_input("<b>", validation) == ["special_chars"]
    assert is_valid("b & c", validation)
