"""Database application type — the reference plugin variant.

A database application owns tables.  The variant exposes a sidebar listing
those tables, extra context-menu items, and navigates to a table when the
database is selected.

Expected application record::

    {
        "id": 1,
        "type": "database",
        "name": "Customers",
        "tables": [{"id": 10, "name": "Contacts", "order": 1}, ...],
    }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from apptypes.context import LifecycleContext
from apptypes.models.descriptor import DependentRecord
from apptypes.types.base import ApplicationType

logger = logging.getLogger(__name__)

TABLE_ROUTE = "database-table"
DASHBOARD_ROUTE = "dashboard"


class DatabaseApplicationType(ApplicationType):
    def get_type(self) -> str:
        return "database"

    def get_icon_class(self) -> str:
        return "database"

    def get_name(self) -> str:
        return "Database"

    def get_route_name(self) -> str:
        return TABLE_ROUTE

    def get_selected_sidebar_component(self) -> str:
        return "DatabaseSidebar"

    def get_context_component(self) -> str:
        return "DatabaseContext"

    def get_dependents_name(self) -> tuple[str, str]:
        return ("table", "tables")

    def get_dependents(self, application: Mapping[str, Any]) -> list[DependentRecord]:
        return [
            DependentRecord(id=table["id"], icon_class="table", name=table["name"])
            for table in application.get("tables", [])
        ]

    def populate(self, application: Mapping[str, Any]) -> dict[str, Any]:
        """Order the tables and default their ``_selected`` flag."""
        tables = sorted(
            (dict(table) for table in application.get("tables", [])),
            key=lambda t: (t.get("order", 0), t.get("id", 0)),
        )
        for table in tables:
            table.setdefault("_selected", False)
        return {**application, "tables": tables}

    def select(self, application: Mapping[str, Any], context: LifecycleContext) -> None:
        """Open the first table of the database, if it has any."""
        tables = application.get("tables", [])
        if not tables:
            logger.debug("Database %s has no tables to open.", application.get("id"))
            return
        context.navigate(
            TABLE_ROUTE,
            {"database_id": application.get("id"), "table_id": tables[0]["id"]},
        )

    def delete(self, application: Mapping[str, Any], context: LifecycleContext) -> None:
        """Leave the table view if it shows a table of the deleted database."""
        if any(table.get("_selected") for table in application.get("tables", [])):
            context.navigate(DASHBOARD_ROUTE)

    def clear_children_selected(self, application: MutableMapping[str, Any]) -> None:
        for table in application.get("tables", []):
            table["_selected"] = False

    def prepare_for_store_update(
        self, application: Mapping[str, Any], data: Mapping[str, Any]
    ) -> dict[str, Any]:
        # The backend never returns the full table list with an update.
        return {key: value for key, value in data.items() if key != "tables"}
