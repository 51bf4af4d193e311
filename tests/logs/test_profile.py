"""
Tests for the logger profile and env parsing
"""

# Third Party
import pytest

# Local
from kogito_operator.logs import profile
from kogito_operator.logs.profile import DEVELOPMENT, PRODUCTION, LoggerProfile


@pytest.mark.parametrize("value", ["1", "t", "T", "TRUE", "true", "True"])
def test_get_bool_env_true(monkeypatch, value):
    """Make sure all true literals parse as True"""
    monkeypatch.setenv("SOME_FLAG", value)
    assert profile.get_bool_env("SOME_FLAG") is True


@pytest.mark.parametrize(
    "value", ["0", "f", "F", "FALSE", "false", "False", "", "yes", "on", "tRuE"]
)
def test_get_bool_env_false(monkeypatch, value):
    """Make sure false literals and unparseable values parse as False"""
    monkeypatch.setenv("SOME_FLAG", value)
    assert profile.get_bool_env("SOME_FLAG") is False


def test_get_bool_env_missing(monkeypatch):
    """Make sure a missing variable is False"""
    monkeypatch.delenv("SOME_FLAG", raising=False)
    assert profile.get_bool_env("SOME_FLAG") is False


def test_get_env_fallback(monkeypatch):
    """Make sure get_env only falls back for unset variables"""
    monkeypatch.delenv("SOME_VAR", raising=False)
    assert profile.get_env("SOME_VAR", "dflt") == "dflt"
    monkeypatch.setenv("SOME_VAR", "")
    assert profile.get_env("SOME_VAR", "dflt") == ""


def test_profiles():
    """Make sure the two profiles have the expected shape"""
    assert DEVELOPMENT == LoggerProfile("console", "debug", True, False)
    assert PRODUCTION == LoggerProfile("json", "info", False, True)
    assert DEVELOPMENT.name == "development"
    assert PRODUCTION.name == "production"


def test_from_env_reads_every_call(monkeypatch):
    """Make sure the profile follows the env without caching"""
    monkeypatch.setenv("DEBUG", "true")
    assert LoggerProfile.from_env() is DEVELOPMENT
    monkeypatch.setenv("DEBUG", "not-a-bool")
    assert LoggerProfile.from_env() is PRODUCTION
    monkeypatch.delenv("DEBUG")
    assert LoggerProfile.from_env() is PRODUCTION


def test_profile_is_immutable():
    """Make sure profiles can't be changed after creation"""
    with pytest.raises(AttributeError):
        PRODUCTION.level = "debug"
