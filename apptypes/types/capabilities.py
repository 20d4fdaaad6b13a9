"""Capability protocols for application types.

Each hook group of ``ApplicationType`` is described by its own Protocol so
host code can depend on the narrowest surface it needs.  ``ApplicationType``
satisfies all of them; plugins override only the subset they provide.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from apptypes.types.base import DEFAULT_APPLICATION_FORM

if TYPE_CHECKING:
    from apptypes.context import LifecycleContext
    from apptypes.models.descriptor import DependentRecord


@runtime_checkable
class Identity(Protocol):
    """Resolved identity of a type."""

    @property
    def type(self) -> str: ...

    @property
    def icon_class(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def route_name(self) -> str | None: ...

    def serialize(self) -> dict[str, Any]: ...


@runtime_checkable
class FormProvider(Protocol):
    def get_application_form_component(self) -> Any: ...


@runtime_checkable
class SidebarProvider(Protocol):
    def get_selected_sidebar_component(self) -> Any | None: ...


@runtime_checkable
class ContextMenuProvider(Protocol):
    def get_context_component(self) -> Any | None: ...


@runtime_checkable
class DependentsProvider(Protocol):
    def get_dependents_name(self) -> tuple[str | None, str | None]: ...

    def get_dependents(self, application: Mapping[str, Any]) -> list[DependentRecord]: ...


@runtime_checkable
class LifecycleParticipant(Protocol):
    """Hooks invoked by the host during an application's life."""

    def populate(self, application: Mapping[str, Any]) -> Any: ...

    def delete(self, application: Mapping[str, Any], context: LifecycleContext) -> None: ...

    def select(self, application: Mapping[str, Any], context: LifecycleContext) -> None: ...

    def clear_children_selected(self, application: MutableMapping[str, Any]) -> None: ...

    def prepare_for_store_update(
        self, application: Mapping[str, Any], data: MutableMapping[str, Any]
    ) -> Mapping[str, Any] | None: ...


def capabilities_of(descriptor: Any) -> list[str]:
    """Return the optional capabilities *descriptor* actually provides.

    A capability counts only when its accessor returns something other than
    the "not provided" default.

    Returns
    -------
    list[str]
        A subset of ``["custom_form", "sidebar", "context_menu",
        "dependents"]`` in that order.
    """
    provided: list[str] = []
    if isinstance(descriptor, FormProvider) and (
        descriptor.get_application_form_component() != DEFAULT_APPLICATION_FORM
    ):
        provided.append("custom_form")
    if isinstance(descriptor, SidebarProvider) and (
        descriptor.get_selected_sidebar_component() is not None
    ):
        provided.append("sidebar")
    if isinstance(descriptor, ContextMenuProvider) and (
        descriptor.get_context_component() is not None
    ):
        provided.append("context_menu")
    if isinstance(descriptor, DependentsProvider) and any(
        noun is not None for noun in descriptor.get_dependents_name()
    ):
        provided.append("dependents")
    return provided
