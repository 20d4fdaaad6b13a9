"""Tests for runtime config — env-driven settings."""

from __future__ import annotations

from apptypes.config import AppTypesConfig


class TestAppTypesConfig:
    def test_defaults(self):
        config = AppTypesConfig()
        assert config.log_level == "INFO"
        assert config.strict_loading is True
        assert config.freeze_registry is True
        assert config.entry_point_group == "apptypes.application_types"

    def test_default_type_paths(self):
        config = AppTypesConfig()
        assert config.type_paths == ["apptypes.contrib.database:DatabaseApplicationType"]

    def test_effective_log_level(self):
        assert AppTypesConfig().effective_log_level() == "INFO"
        assert AppTypesConfig(log_level="warning").effective_log_level() == "WARNING"

    def test_debug_forces_debug_level(self):
        assert AppTypesConfig(debug=True).effective_log_level() == "DEBUG"

    def test_explicit_level_wins_over_debug(self):
        assert AppTypesConfig(debug=True).effective_log_level("error") == "ERROR"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("APPTYPES_STRICT_LOADING", "false")
        monkeypatch.setenv("APPTYPES_TYPE_PATHS", '["sample_plugins:SimpleApplicationType"]')
        config = AppTypesConfig()
        assert config.strict_loading is False
        assert config.type_paths == ["sample_plugins:SimpleApplicationType"]
