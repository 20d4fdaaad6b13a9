"""Application type registry — one descriptor per type key.

The registry is created once at start-up, populated while plugins load and
then frozen.  After ``freeze()`` it is read-only: lookups keep working,
registration and removal raise.  Pass the instance to whatever needs
lookups instead of reaching for a global.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from apptypes.types.base import ApplicationType

logger = logging.getLogger(__name__)


class DuplicateTypeError(ValueError):
    """Raised when a type key is registered twice."""


class UnknownTypeError(KeyError):
    """Raised when looking up a type key that was never registered."""


class RegistryFrozenError(RuntimeError):
    """Raised when mutating a registry after ``freeze()``."""


class ApplicationTypeRegistry:
    """Keyed store of application type descriptors.

    Examples
    --------
    >>> from apptypes.contrib.database import DatabaseApplicationType
    >>> registry = ApplicationTypeRegistry()
    >>> registry.register(DatabaseApplicationType())
    'database'
    >>> registry.get("database").name
    'Database'
    """

    def __init__(self) -> None:
        self._types: dict[str, ApplicationType] = {}
        self._frozen = False

    # -- Registration -------------------------------------------------------

    def register(self, descriptor: ApplicationType) -> str:
        """Add *descriptor* under its type key.

        Returns
        -------
        str
            The type key the descriptor was registered under.

        Raises
        ------
        TypeError
            If *descriptor* is not an ``ApplicationType`` instance.
        DuplicateTypeError
            If a descriptor with the same type key is already registered.
        RegistryFrozenError
            If the registry has been frozen.
        """
        if not isinstance(descriptor, ApplicationType):
            raise TypeError(
                f"Expected an ApplicationType instance, got {type(descriptor).__name__}."
            )
        self._ensure_mutable()
        key = descriptor.type
        if key in self._types:
            raise DuplicateTypeError(
                f"Application type '{key}' is already registered "
                f"({type(self._types[key]).__name__})."
            )
        self._types[key] = descriptor
        logger.info("Registered application type '%s' (%s)", key, type(descriptor).__name__)
        return key

    def unregister(self, type_name: str) -> bool:
        """Remove the descriptor registered under *type_name*.

        Returns ``True`` if it was found and removed, ``False`` otherwise.
        """
        self._ensure_mutable()
        if type_name in self._types:
            del self._types[type_name]
            logger.info("Unregistered application type '%s'.", type_name)
            return True
        logger.warning("Cannot unregister '%s' — not registered.", type_name)
        return False

    def freeze(self) -> None:
        """Make the registry read-only for the rest of the process."""
        self._frozen = True
        logger.debug("Registry frozen with %d application type(s).", len(self._types))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                "The application type registry is frozen; register plugins at start-up."
            )

    # -- Lookup -------------------------------------------------------------

    def get(self, type_name: str) -> ApplicationType:
        """Return the descriptor for *type_name*.

        Raises
        ------
        UnknownTypeError
            If nothing is registered under *type_name*.
        """
        try:
            return self._types[type_name]
        except KeyError:
            raise UnknownTypeError(
                f"Application type '{type_name}' is not registered."
            ) from None

    def exists(self, type_name: str) -> bool:
        return type_name in self._types

    def get_all(self) -> dict[str, ApplicationType]:
        """Return a copy of the key -> descriptor mapping."""
        return dict(self._types)

    def get_ordered_list(self) -> list[ApplicationType]:
        """Return all descriptors sorted by name, then by type key."""
        return sorted(self._types.values(), key=lambda d: (d.name, d.type))

    def serialize_all(self) -> list[dict[str, Any]]:
        """Serialized records of all descriptors, in ``get_ordered_list`` order."""
        return [descriptor.serialize() for descriptor in self.get_ordered_list()]

    # -- Container protocol -------------------------------------------------

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types

    def __iter__(self) -> Iterator[ApplicationType]:
        return iter(self.get_ordered_list())

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        state = " frozen" if self._frozen else ""
        return f"<{type(self).__name__} types={sorted(self._types)!r}{state}>"
