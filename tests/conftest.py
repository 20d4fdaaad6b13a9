"""Shared test fixtures for apptypes."""

from __future__ import annotations

from typing import Any

import pytest

from apptypes.context import RecordingContext
from apptypes.contrib.database import DatabaseApplicationType
from apptypes.lifecycle import ApplicationLifecycle
from apptypes.registry import ApplicationTypeRegistry
from sample_plugins import SidebarApplicationType, SimpleApplicationType


@pytest.fixture
def simple_type() -> SimpleApplicationType:
    """Provide a descriptor overriding only its identity."""
    return SimpleApplicationType()


@pytest.fixture
def registry() -> ApplicationTypeRegistry:
    """Provide a registry with the database, simple and sidebar types."""
    reg = ApplicationTypeRegistry()
    reg.register(DatabaseApplicationType())
    reg.register(SimpleApplicationType())
    reg.register(SidebarApplicationType())
    return reg


@pytest.fixture
def context() -> RecordingContext:
    return RecordingContext()


@pytest.fixture
def lifecycle(registry: ApplicationTypeRegistry, context: RecordingContext) -> ApplicationLifecycle:
    return ApplicationLifecycle(registry, context)


@pytest.fixture
def database_application() -> dict[str, Any]:
    """Provide a database application record as fetched from the backend."""
    return {
        "id": 1,
        "type": "database",
        "name": "Customers",
        "tables": [
            {"id": 12, "name": "Orders", "order": 2},
            {"id": 11, "name": "Contacts", "order": 1},
        ],
    }
