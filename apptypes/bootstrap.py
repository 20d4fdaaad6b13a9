"""Start-up wiring: build the process-wide application type registry."""

from __future__ import annotations

import logging

from apptypes.config import AppTypesConfig
from apptypes.plugins.loader import ApplicationTypeLoader
from apptypes.registry import ApplicationTypeRegistry

logger = logging.getLogger(__name__)


def build_registry(settings: AppTypesConfig | None = None) -> ApplicationTypeRegistry:
    """Create a registry and load every configured plugin into it.

    Explicit ``type_paths`` load first, then entry points.  The registry is
    frozen afterwards unless ``freeze_registry`` is disabled.

    Raises
    ------
    ConfigurationError
        In strict mode, when a plugin is missing a required identity field.
    DuplicateTypeError
        When two plugins declare the same type key.
    """
    if settings is None:
        from apptypes.config import config as settings

    registry = ApplicationTypeRegistry()
    loader = ApplicationTypeLoader(registry, strict=settings.strict_loading)
    loader.load_paths(settings.type_paths)
    if settings.load_entry_points:
        loader.load_entry_points(settings.entry_point_group)

    if loader.skipped:
        logger.warning(
            "%d application type plugin(s) skipped: %s",
            len(loader.skipped),
            ", ".join(loader.skipped),
        )
    if settings.freeze_registry:
        registry.freeze()
    logger.info("Application type registry ready with %d type(s).", len(registry))
    return registry
