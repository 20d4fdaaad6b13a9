"""Application type value objects — identity, wire record, dependents.

All models are Pydantic v2 and frozen.  Field names are snake_case in
Python; the wire shape produced by ``model_dump(by_alias=True)`` uses the
camelCase names consumed by generic, non-polymorphic clients.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ApplicationTypeIdentity(BaseModel):
    """The four identity fields of an application type, resolved once.

    ``type``, ``icon_class`` and ``name`` are guaranteed non-null by the
    builder in ``apptypes.types.base``; ``route_name`` is optional.  Values are
    taken as-is; nothing is coerced to a string.

    Examples
    --------
    >>> identity = ApplicationTypeIdentity(
    ...     type="database", icon_class="database", name="Database",
    ... )
    >>> identity.route_name is None
    True
    """

    model_config = ConfigDict(frozen=True, strict=True)

    type: str
    icon_class: str
    name: str
    route_name: str | None = None


class SerializedApplicationType(BaseModel):
    """Transport-safe description of an application type.

    The aliased dump is the public contract: exactly ``type``,
    ``iconClass``, ``name``, ``routeName`` and
    ``hasSelectedSidebarComponent``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str
    icon_class: str = Field(alias="iconClass")
    name: str
    route_name: str | None = Field(default=None, alias="routeName")
    has_selected_sidebar_component: bool = Field(
        default=False, alias="hasSelectedSidebarComponent"
    )

    def to_record(self) -> dict[str, Any]:
        """Return the plain camelCase record."""
        return self.model_dump(by_alias=True)


class DependentRecord(BaseModel):
    """A child entity shown in delete confirmations and overviews."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | str
    icon_class: str = Field(alias="iconClass")
    name: str

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
