"""Abstract application type with eager identity validation.

Every plugin variant subclasses ``ApplicationType`` and overrides the
identity accessors plus whichever capability and lifecycle hooks it needs:

    get_type -> get_icon_class -> get_name -> get_route_name

The accessors are called exactly once, during construction, and the result
is frozen into an ``ApplicationTypeIdentity``.  A variant missing its type,
icon class or name never produces an instance, so a malformed descriptor
can never reach the registry.

Capability accessors return ``None`` (or an empty value) when the variant
does not provide the capability.  Callers treat that as "fall back to the
generic behaviour", never as an error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from apptypes.models.descriptor import (
    ApplicationTypeIdentity,
    DependentRecord,
    SerializedApplicationType,
)

if TYPE_CHECKING:
    from apptypes.context import LifecycleContext

logger = logging.getLogger(__name__)

# Identifier of the generic creation form; only contains a name field.
DEFAULT_APPLICATION_FORM = "ApplicationForm"


class ConfigurationError(ValueError):
    """Raised when an application type is missing a required identity field.

    This is a programming error in the plugin, surfaced while the plugin is
    being loaded.  It is never caught inside the descriptor.
    """


def build_identity(descriptor: ApplicationType) -> ApplicationTypeIdentity:
    """Resolve and validate the identity of *descriptor*.

    Each accessor is invoked once, in order, before any check runs.

    Raises
    ------
    ConfigurationError
        If ``get_type``, ``get_icon_class`` or ``get_name`` returns ``None``,
        or any identity accessor returns something other than a string.
    """
    type_name = descriptor.get_type()
    icon_class = descriptor.get_icon_class()
    name = descriptor.get_name()
    route_name = descriptor.get_route_name()

    owner = type(descriptor).__name__
    if type_name is None:
        raise ConfigurationError(f"{owner}: type name must be set")
    if icon_class is None:
        raise ConfigurationError(f"{owner}: icon class must be set")
    if name is None:
        raise ConfigurationError(f"{owner}: name must be set")

    try:
        return ApplicationTypeIdentity(
            type=type_name,
            icon_class=icon_class,
            name=name,
            route_name=route_name,
        )
    except ValidationError as exc:
        fields = ", ".join(dict.fromkeys(str(err["loc"][0]) for err in exc.errors()))
        raise ConfigurationError(
            f"{owner}: identity fields must be strings ({fields})"
        ) from exc


class ApplicationType:
    """Base class for application type plugins.

    Subclasses **must** override:
        * ``get_type()`` — unique registry key (e.g. ``"database"``).
        * ``get_icon_class()`` — icon glyph name (e.g. ``"database"``).
        * ``get_name()`` — human-readable name.

    Subclasses **may** override the route name, the capability accessors
    and the lifecycle hooks.  The defaults mean "not provided".

    Examples
    --------
    >>> class SimpleType(ApplicationType):
    ...     def get_type(self):
    ...         return "simple"
    ...     def get_icon_class(self):
    ...         return "cube"
    ...     def get_name(self):
    ...         return "Simple"
    >>> SimpleType().serialize()["hasSelectedSidebarComponent"]
    False
    """

    def __init__(self) -> None:
        self._identity = build_identity(self)
        logger.debug("Constructed application type %r", self._identity.type)

    # ------------------------------------------------------------------
    # Identity accessors: override in subclasses
    # ------------------------------------------------------------------

    def get_type(self) -> str | None:
        """Unique key of this type in the registry."""
        return None

    def get_icon_class(self) -> str | None:
        """Name of the icon shown next to applications of this type.

        Returning ``"database"`` results in the ``fas fa-database`` glyph.
        """
        return None

    def get_name(self) -> str | None:
        """Human-readable name of the type."""
        return None

    def get_route_name(self) -> str | None:
        """Route the host navigates to when an application is selected."""
        return None

    # ------------------------------------------------------------------
    # Resolved identity (read-only)
    # ------------------------------------------------------------------

    @property
    def identity(self) -> ApplicationTypeIdentity:
        return self._identity

    @property
    def type(self) -> str:
        return self._identity.type

    @property
    def icon_class(self) -> str:
        return self._identity.icon_class

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def route_name(self) -> str | None:
        return self._identity.route_name

    # ------------------------------------------------------------------
    # Capability accessors
    # ------------------------------------------------------------------

    def get_application_form_component(self) -> Any:
        """Form rendered when creating a new application of this type.

        The generic form only contains a name field.  Variants needing
        extra fields on creation return their own form here.
        """
        return DEFAULT_APPLICATION_FORM

    def get_selected_sidebar_component(self) -> Any | None:
        """Sidebar rendered while an application of this type is selected.

        A database could use this to list its tables.
        """
        return None

    def get_context_component(self) -> Any | None:
        """Extra items added to the application's context menu."""
        return None

    def get_dependents_name(self) -> tuple[str | None, str | None]:
        """Singular and plural noun of the dependents, e.g. ``("table", "tables")``."""
        return (None, None)

    def get_dependents(self, application: Mapping[str, Any]) -> list[DependentRecord]:
        """Children of *application* shown when deleting or listing it."""
        return []

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_serialized(self) -> SerializedApplicationType:
        return SerializedApplicationType(
            type=self.type,
            icon_class=self.icon_class,
            name=self.name,
            route_name=self.route_name,
            has_selected_sidebar_component=(
                self.get_selected_sidebar_component() is not None
            ),
        )

    def serialize(self) -> dict[str, Any]:
        """Return the camelCase record describing this type.

        Keys: ``type``, ``iconClass``, ``name``, ``routeName`` and
        ``hasSelectedSidebarComponent``.  The sidebar component itself is
        never included.
        """
        return self.to_serialized().to_record()

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def populate(self, application: Mapping[str, Any]) -> Any:
        """Called every time a fresh application is fetched from the backend.

        Variants with their own properties return an updated record here.
        The default returns *application* unchanged.
        """
        return application

    def delete(self, application: Mapping[str, Any], context: LifecycleContext) -> None:
        """Called after an application of this type has been deleted."""

    def select(self, application: Mapping[str, Any], context: LifecycleContext) -> None:
        """Called when an application of this type becomes the selection."""

    def clear_children_selected(self, application: MutableMapping[str, Any]) -> None:
        """Clear any "selected child" state tracked for *application*."""

    def prepare_for_store_update(
        self, application: Mapping[str, Any], data: MutableMapping[str, Any]
    ) -> Mapping[str, Any] | None:
        """Return the update payload that may safely be applied to *application*.

        Some values could break the update; variants strip or rewrite them
        here, either by returning a new payload or by editing *data* in place and
        returning ``None``.  The default returns *data* unchanged.
        """
        return data

    # ------------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"<{type(self).__name__} type={self.type!r}>"
