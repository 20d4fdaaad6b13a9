"""Host context handed to side-effecting lifecycle hooks.

``delete`` and ``select`` never act on the host directly; they ask the
context to navigate or to dispatch a store action.  Any asynchronous work
triggered by those requests belongs to the host's implementation.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


@runtime_checkable
class LifecycleContext(Protocol):
    """Protocol for the mutable handle passed to ``delete`` and ``select``."""

    def navigate(self, route_name: str, params: dict[str, Any] | None = None) -> None:
        """Request navigation to *route_name* with optional route *params*."""
        ...

    def dispatch(self, action: str, payload: dict[str, Any] | None = None) -> None:
        """Request the host store to perform *action*."""
        ...


class ContextCall(BaseModel):
    """Immutable record of a single request made through a context."""

    model_config = ConfigDict(frozen=True)

    kind: str  # "navigate" or "dispatch"
    target: str
    payload: dict[str, Any] = Field(default_factory=dict)


class RecordingContext:
    """Context that records every request instead of acting on it.

    Suitable for headless hosts and tests; interactive hosts provide their
    own ``LifecycleContext`` implementation.

    Examples
    --------
    >>> ctx = RecordingContext()
    >>> ctx.navigate("dashboard")
    >>> ctx.last_route
    'dashboard'
    """

    def __init__(self) -> None:
        self.calls: list[ContextCall] = []

    def navigate(self, route_name: str, params: dict[str, Any] | None = None) -> None:
        logger.debug("navigate -> %s %s", route_name, params or {})
        self.calls.append(
            ContextCall(kind="navigate", target=route_name, payload=dict(params or {}))
        )

    def dispatch(self, action: str, payload: dict[str, Any] | None = None) -> None:
        logger.debug("dispatch -> %s", action)
        self.calls.append(
            ContextCall(kind="dispatch", target=action, payload=dict(payload or {}))
        )

    @property
    def navigations(self) -> list[ContextCall]:
        return [c for c in self.calls if c.kind == "navigate"]

    @property
    def last_route(self) -> str | None:
        """Route of the most recent navigation, or ``None``."""
        navigations = self.navigations
        return navigations[-1].target if navigations else None
