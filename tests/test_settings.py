"""
tests/test_settings.py
======================

Unit tests for kindred.settings
"""

from kindred.settings import Settings


def test_defaults(monkeypatch):
    for name in ("KINDRED_LOCAL_COUNTRY", "KINDRED_LENGTH_UNIT", "KINDRED_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.local_country == "UNITED_STATES_OF_AMERICA"
    assert settings.length_unit == "METER"
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KINDRED_LOCAL_COUNTRY", "CANADA")
    monkeypatch.setenv("kindred_length_unit", "FOOT")
    settings = Settings(_env_file=None)
    assert settings.local_country == "CANADA"
    assert settings.length_unit == "FOOT"
