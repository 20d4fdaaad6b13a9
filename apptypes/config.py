"""Runtime configuration — env-driven.

Reads from a .env file and APPTYPES_* environment variables via
pydantic-settings.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppTypesConfig(BaseSettings):
    """Configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export APPTYPES_DEBUG=true
        export APPTYPES_STRICT_LOADING=false
        export APPTYPES_TYPE_PATHS='["my_pkg.kanban:KanbanApplicationType"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APPTYPES_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "INFO"
    debug: bool = False  # forces DEBUG regardless of log_level

    # Plugin loading
    type_paths: list[str] = Field(
        default_factory=lambda: ["apptypes.contrib.database:DatabaseApplicationType"]
    )
    entry_point_group: str = "apptypes.application_types"
    load_entry_points: bool = True
    strict_loading: bool = True  # a plugin failing validation aborts start-up
    freeze_registry: bool = True

    def effective_log_level(self, override: str | None = None) -> str:
        """Level for the root logger: *override*, else DEBUG in debug mode, else ``log_level``."""
        if override:
            return override.upper()
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()


# Module-level singleton: import as `from apptypes.config import config`
config = AppTypesConfig()
