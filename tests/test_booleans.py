import pytest

from envtoken import boolean_from_environment_variable, parse_boolean


@pytest.mark.parametrize("value", ["true", "TRUE", "True", "yes", "YES", "1", " yes "])
def test_parse_boolean_truthy(value):
    assert parse_boolean(value) is True


@pytest.mark.parametrize("value", ["", "0", "no", "false", "2", "on", "y", "11"])
def test_parse_boolean_falsy(value):
    assert parse_boolean(value) is False


def test_boolean_from_environment_variable_unset(monkeypatch):
    monkeypatch.delenv("_ENVTOKEN_BOOL", raising=False)

    assert boolean_from_environment_variable("_ENVTOKEN_BOOL") is False


@pytest.mark.parametrize("value,expected", [("yes", True), ("no", False), ("", False)])
def test_boolean_from_environment_variable_reads_process_env(monkeypatch, value, expected):
    monkeypatch.setenv("_ENVTOKEN_BOOL", value)

    assert boolean_from_environment_variable("_ENVTOKEN_BOOL") is expected


def test_boolean_from_environment_variable_with_lookup(environ):
    environ["FEATURE_X"] = "1"

    assert boolean_from_environment_variable("FEATURE_X", environ.get) is True
    assert boolean_from_environment_variable("FEATURE_Y", environ.get) is False
