"""Tests for MapperSettings."""
import pytest

from fieldmap.config import MapperSettings


class TestMapperSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch):
        for name in ("FIELDMAP_DUPLICATE_TARGETS", "FIELDMAP_LOG_LEVEL", "FIELDMAP_JSON_INDENT"):
            monkeypatch.delenv(name, raising=False)

        settings = MapperSettings.from_env()

        assert settings.duplicate_targets == "warn"
        assert settings.log_level == "WARNING"
        assert settings.json_indent == 2

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FIELDMAP_DUPLICATE_TARGETS", "ERROR")
        monkeypatch.setenv("FIELDMAP_LOG_LEVEL", "debug")
        monkeypatch.setenv("FIELDMAP_JSON_INDENT", "4")

        settings = MapperSettings.from_env()

        assert settings.duplicate_targets == "error"
        assert settings.log_level == "DEBUG"
        assert settings.json_indent == 4

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            MapperSettings(duplicate_targets="sometimes")

    def test_invalid_indent_names_variable(self, monkeypatch):
        monkeypatch.setenv("FIELDMAP_JSON_INDENT", "wide")

        with pytest.raises(ValueError, match="FIELDMAP_JSON_INDENT"):
            MapperSettings.from_env()

    def test_invalid_policy_names_variable(self, monkeypatch):
        monkeypatch.delenv("FIELDMAP_JSON_INDENT", raising=False)
        monkeypatch.setenv("FIELDMAP_DUPLICATE_TARGETS", "sometimes")

        with pytest.raises(ValueError, match="FIELDMAP_DUPLICATE_TARGETS"):
            MapperSettings.from_env()
