"""Tests for store mode configuration."""

import pytest

from overstate import Mode, StoreConfigError, default_mode
from overstate.config import MODE_ENV_VAR


class TestMode:
    def test_parse_enum(self):
        assert Mode.parse(Mode.PRODUCTION) is Mode.PRODUCTION

    def test_parse_string_case_insensitive(self):
        assert Mode.parse("Production") is Mode.PRODUCTION
        assert Mode.parse(" development ") is Mode.DEVELOPMENT

    def test_parse_unknown(self):
        with pytest.raises(StoreConfigError, match="Unknown store mode"):
            Mode.parse("staging")

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            Mode.parse("staging")


class TestDefaultMode:
    def test_unset_is_development(self, monkeypatch):
        monkeypatch.delenv(MODE_ENV_VAR, raising=False)
        assert default_mode() is Mode.DEVELOPMENT

    def test_blank_is_development(self, monkeypatch):
        monkeypatch.setenv(MODE_ENV_VAR, "  ")
        assert default_mode() is Mode.DEVELOPMENT

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(MODE_ENV_VAR, "production")
        assert default_mode() is Mode.PRODUCTION

    def test_bad_env(self, monkeypatch):
        monkeypatch.setenv(MODE_ENV_VAR, "nope")
        with pytest.raises(StoreConfigError):
            default_mode()
