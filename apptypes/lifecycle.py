"""Generic lifecycle dispatch — host code that never knows concrete variants.

``ApplicationLifecycle`` selects the governing descriptor from an
application's ``type`` field and forwards each lifecycle event to it.  The
descriptor never retains the application; anything it needs to do on the
host goes through the ``LifecycleContext``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from apptypes.context import LifecycleContext
from apptypes.models.descriptor import DependentRecord
from apptypes.registry import ApplicationTypeRegistry
from apptypes.types.base import ApplicationType

logger = logging.getLogger(__name__)


class DependentsOverview(BaseModel):
    """Children of an application, as shown before deleting it.

    ``summary`` is ``None`` when the type has no dependents concept, in
    which case the host hides the dependents message entirely.
    """

    model_config = ConfigDict(frozen=True)

    singular: str | None = None
    plural: str | None = None
    dependents: list[DependentRecord] = Field(default_factory=list)
    summary: str | None = None


def describe_dependents(
    names: tuple[str | None, str | None], count: int
) -> str | None:
    """Render "There is 1 table" / "There are 2 tables".

    Returns ``None`` when both nouns are ``None``.  A missing plural falls
    back to the singular and vice versa.
    """
    singular, plural = names
    if singular is None and plural is None:
        return None
    if count == 1:
        return f"There is 1 {singular or plural}"
    return f"There are {count} {plural or singular}"


class ApplicationLifecycle:
    """Dispatches lifecycle events to the descriptor governing each application.

    Parameters
    ----------
    registry:
        The populated (usually frozen) application type registry.
    context:
        Host handle passed to ``delete`` and ``select``.
    """

    def __init__(self, registry: ApplicationTypeRegistry, context: LifecycleContext) -> None:
        self._registry = registry
        self._context = context

    def descriptor_for(self, application: Mapping[str, Any]) -> ApplicationType:
        """Return the descriptor registered for ``application["type"]``.

        Raises
        ------
        ValueError
            If the record has no ``type`` field.
        UnknownTypeError
            If the type is not registered.
        """
        type_name = application.get("type")
        if type_name is None:
            raise ValueError(
                f"Application {application.get('id')!r} has no 'type' field."
            )
        return self._registry.get(type_name)

    # -- Transform hooks ----------------------------------------------------

    def populate(self, application: Mapping[str, Any]) -> Any:
        """Populate a freshly fetched application."""
        return self.descriptor_for(application).populate(application)

    def populate_all(self, applications: Iterable[Mapping[str, Any]]) -> list[Any]:
        populated = [self.populate(application) for application in applications]
        logger.debug("Populated %d application(s).", len(populated))
        return populated

    def update(
        self, application: Mapping[str, Any], data: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Return a new record with the prepared *data* applied to *application*.

        The hook receives a copy of *data*.  A hook that edits that copy in
        place and returns ``None`` has its edited copy applied.
        """
        payload = dict(data)
        prepared = self.descriptor_for(application).prepare_for_store_update(
            application, payload
        )
        if prepared is None:
            prepared = payload
        return {**application, **prepared}

    # -- Side-effect hooks --------------------------------------------------

    def delete(self, application: Mapping[str, Any]) -> None:
        descriptor = self.descriptor_for(application)
        logger.info("Deleting application %r of type '%s'.", application.get("id"), descriptor.type)
        descriptor.delete(application, self._context)

    def select(self, application: Mapping[str, Any]) -> None:
        descriptor = self.descriptor_for(application)
        logger.info("Selecting application %r of type '%s'.", application.get("id"), descriptor.type)
        descriptor.select(application, self._context)

    def clear_children_selected(self, application: MutableMapping[str, Any]) -> None:
        self.descriptor_for(application).clear_children_selected(application)

    # -- Overview -----------------------------------------------------------

    def dependents_overview(self, application: Mapping[str, Any]) -> DependentsOverview:
        """Collect the dependents of *application* with a count message."""
        descriptor = self.descriptor_for(application)
        singular, plural = descriptor.get_dependents_name()
        dependents = list(descriptor.get_dependents(application))
        return DependentsOverview(
            singular=singular,
            plural=plural,
            dependents=dependents,
            summary=describe_dependents((singular, plural), len(dependents)),
        )
