"""Tests for settings loading and value rendering."""

import logging

import pytest

from helpers import assert_fails
from fluentexpect import (
    ExpectSettings,
    configure,
    expect,
    format_value,
    get_settings,
    load_settings,
    validate_settings_yaml,
)


def test_defaults():
    settings = get_settings()
    assert settings.max_value_length == 100
    assert settings.max_depth is None
    assert settings.log_level is None


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "expect.yaml"
    path.write_text("expect:\n  max_value_length: 20\n  max_depth: 2\n  log_level: debug\n")

    settings, result = load_settings(path)
    assert result.is_valid
    assert settings == ExpectSettings(max_value_length=20, max_depth=2, log_level="DEBUG")


def test_load_settings_missing_file(tmp_path):
    settings, result = load_settings(tmp_path / "missing.yaml")
    assert settings is None
    assert not result.is_valid
    assert "File not found" in str(result)


def test_invalid_yaml_is_reported():
    settings, result = validate_settings_yaml("expect: [unclosed")
    assert settings is None
    assert "Invalid YAML syntax" in str(result)


def test_empty_document_gives_defaults():
    settings, result = validate_settings_yaml("")
    assert result.is_valid
    assert settings == ExpectSettings()


@pytest.mark.parametrize(
    "text, path",
    [
        ("- 1\n- 2\n", "yaml"),
        ("expect: 5\n", "expect"),
        ("expect:\n  max_value_length: 2\n", "expect.max_value_length"),
        ("expect:\n  max_depth: 0\n", "expect.max_depth"),
        ("expect:\n  log_level: LOUD\n", "expect.log_level"),
        ("expect:\n  colour: true\n", "expect.colour"),
    ],
)
def test_invalid_settings_are_reported(text, path):
    settings, result = validate_settings_yaml(text)
    assert settings is None
    assert [e.path for e in result.errors] == [path]


def test_configure_overrides_fields():
    configure(max_value_length=10)
    assert get_settings().max_value_length == 10
    assert format_value("x" * 50) == "'xxxxxx..."


def test_configure_rejects_unknown_fields():
    with pytest.raises(TypeError):
        configure(colour=True)


def test_configure_sets_log_level():
    configure(ExpectSettings(log_level="DEBUG"))
    assert logging.getLogger("fluentexpect").level == logging.DEBUG


def test_configure_normalises_log_level_case():
    settings = configure(log_level="debug")
    assert settings.log_level == "DEBUG"
    assert logging.getLogger("fluentexpect").level == logging.DEBUG


@pytest.mark.parametrize(
    "overrides, path",
    [
        ({"max_value_length": 2}, "expect.max_value_length"),
        ({"max_depth": 0}, "expect.max_depth"),
        ({"log_level": "LOUD"}, "expect.log_level"),
    ],
)
def test_configure_validates_like_settings_files(overrides, path):
    before = get_settings()
    with pytest.raises(ValueError, match=path):
        configure(**overrides)
    assert get_settings() is before


def test_package_log_level_is_restored_between_tests():
    # test_configure_sets_log_level raised it to DEBUG earlier in this module
    assert logging.getLogger("fluentexpect").level == logging.NOTSET


def test_failure_messages_respect_max_value_length():
    configure(max_value_length=12)
    error = assert_fails(lambda: expect(list(range(100))).to_have_length(1))
    assert "[0, 1, 2,..." in error.message


def test_format_value_respects_max_depth():
    configure(max_depth=1)
    assert format_value({"a": {"b": 1}}) == "{'a': {...}}"
