"""Plugin loader — imports application type classes and registers them.

Plugins are declared either as explicit ``"module:Class"`` paths (see
``AppTypesConfig.type_paths``) or as ``importlib.metadata`` entry points::

    [project.entry-points."apptypes.application_types"]
    kanban = "my_package.kanban:KanbanApplicationType"

Constructing a descriptor validates its identity.  In strict mode a
``ConfigurationError`` aborts loading; otherwise the offending plugin is
logged and skipped while the rest keep loading.
"""

from __future__ import annotations

import importlib
import logging
from importlib.metadata import entry_points

from apptypes.registry import ApplicationTypeRegistry
from apptypes.types.base import ApplicationType, ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_POINT_GROUP = "apptypes.application_types"


def import_application_type(path: str) -> type[ApplicationType]:
    """Resolve ``"package.module:ClassName"`` to an ``ApplicationType`` subclass.

    Raises
    ------
    ValueError
        If *path* is not of the form ``module:attribute``.
    ImportError
        If the module cannot be imported.
    AttributeError
        If the module has no such attribute.
    TypeError
        If the attribute is not an ``ApplicationType`` subclass.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(
            f"Invalid application type path '{path}'; expected 'module:ClassName'."
        )
    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    if not (isinstance(obj, type) and issubclass(obj, ApplicationType)):
        raise TypeError(f"'{path}' is not an ApplicationType subclass.")
    return obj


class ApplicationTypeLoader:
    """Instantiates application type plugins into a registry.

    Parameters
    ----------
    registry:
        Target registry; must not be frozen yet.
    strict:
        When ``True`` (default), a plugin failing validation aborts loading.
        When ``False`` it is logged and skipped.
    """

    def __init__(self, registry: ApplicationTypeRegistry, *, strict: bool = True) -> None:
        self._registry = registry
        self._strict = strict
        self.skipped: list[str] = []

    def load_class(self, cls: type[ApplicationType], source: str = "") -> ApplicationType | None:
        """Construct *cls* and register the instance.

        Returns the registered descriptor, or ``None`` if it was skipped.
        """
        source = source or f"{cls.__module__}:{cls.__qualname__}"
        try:
            descriptor = cls()
        except ConfigurationError:
            if self._strict:
                logger.error("Application type plugin %s failed validation.", source)
                raise
            logger.exception("Skipping application type plugin %s.", source)
            self.skipped.append(source)
            return None
        self._registry.register(descriptor)
        return descriptor

    def load(self, path: str) -> ApplicationType | None:
        """Import and register the class at ``module:Class`` *path*."""
        return self.load_class(import_application_type(path), source=path)

    def load_paths(self, paths: list[str]) -> list[ApplicationType]:
        loaded: list[ApplicationType] = []
        for path in paths:
            descriptor = self.load(path)
            if descriptor is not None:
                loaded.append(descriptor)
        return loaded

    def load_entry_points(self, group: str = DEFAULT_ENTRY_POINT_GROUP) -> list[ApplicationType]:
        """Register every application type advertised under entry-point *group*."""
        loaded: list[ApplicationType] = []
        for ep in entry_points(group=group):
            cls = ep.load()
            if not (isinstance(cls, type) and issubclass(cls, ApplicationType)):
                raise TypeError(
                    f"Entry point '{ep.name}' ({ep.value}) is not an ApplicationType subclass."
                )
            descriptor = self.load_class(cls, source=ep.value)
            if descriptor is not None:
                loaded.append(descriptor)
        logger.info("Loaded %d application type(s) from entry points '%s'.", len(loaded), group)
        return loaded
