import pytest

from launchkit.errors import ConfigurationError, InvalidOptionsError
from launchkit.parsing import DEFAULT_OPTIONS, ParsingOptions, parse_message


def test_defaults() -> None:
    assert DEFAULT_OPTIONS.hide_code_blocks is True
    assert DEFAULT_OPTIONS.hide_file_markers is True
    assert DEFAULT_OPTIONS.show_technical_details is False
    assert DEFAULT_OPTIONS.user_type == "beginner"


def test_merge_inherits_unspecified_fields() -> None:
    merged = DEFAULT_OPTIONS.merged({"user_type": "developer"})
    assert merged.user_type == "developer"
    assert merged.hide_code_blocks is True
    assert merged.hide_file_markers is True


def test_merge_accepts_camel_case_keys() -> None:
    merged = DEFAULT_OPTIONS.merged({"userType": "admin", "hideCodeBlocks": False})
    assert merged.user_type == "admin"
    assert merged.hide_code_blocks is False


def test_merge_with_options_instance_only_applies_set_fields() -> None:
    base = ParsingOptions(hide_file_markers=False)
    merged = base.merged(ParsingOptions(user_type="developer"))
    assert merged.hide_file_markers is False
    assert merged.user_type == "developer"


def test_merge_with_none_returns_same_options() -> None:
    assert DEFAULT_OPTIONS.merged(None) is DEFAULT_OPTIONS


def test_merge_does_not_mutate_defaults() -> None:
    DEFAULT_OPTIONS.merged({"hide_code_blocks": False})
    assert DEFAULT_OPTIONS.hide_code_blocks is True


@pytest.mark.parametrize("overrides", [{"user_type": "guest"}, {"hide_everything": True}])
def test_invalid_options_raise(overrides: dict[str, object]) -> None:
    with pytest.raises(InvalidOptionsError):
        parse_message("hi", overrides)


def test_invalid_options_error_is_configuration_error() -> None:
    assert issubclass(InvalidOptionsError, ConfigurationError)
