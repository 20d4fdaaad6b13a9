"""Tests for the bundled database application type."""

from __future__ import annotations

from apptypes.context import RecordingContext
from apptypes.contrib.database import DatabaseApplicationType


class TestDatabaseIdentity:
    def test_serialize(self):
        assert DatabaseApplicationType().serialize() == {
            "type": "database",
            "iconClass": "database",
            "name": "Database",
            "routeName": "database-table",
            "hasSelectedSidebarComponent": True,
        }

    def test_dependents(self, database_application):
        descriptor = DatabaseApplicationType()
        assert descriptor.get_dependents_name() == ("table", "tables")
        records = [d.to_record() for d in descriptor.get_dependents(database_application)]
        assert records[0] == {"id": 12, "iconClass": "table", "name": "Orders"}

    def test_dependents_without_tables(self):
        assert DatabaseApplicationType().get_dependents({"id": 1, "type": "database"}) == []


class TestDatabaseHooks:
    def test_populate_orders_tables_without_mutating_input(self, database_application):
        populated = DatabaseApplicationType().populate(database_application)
        assert [t["id"] for t in populated["tables"]] == [11, 12]
        assert all(t["_selected"] is False for t in populated["tables"])
        assert "_selected" not in database_application["tables"][0]
        assert populated is not database_application

    def test_select_without_tables(self):
        ctx = RecordingContext()
        DatabaseApplicationType().select({"id": 1, "type": "database", "tables": []}, ctx)
        assert ctx.calls == []

    def test_delete_selected_database_goes_to_dashboard(self, database_application):
        descriptor = DatabaseApplicationType()
        application = descriptor.populate(database_application)
        application["tables"][1]["_selected"] = True
        ctx = RecordingContext()
        descriptor.delete(application, ctx)
        assert ctx.last_route == "dashboard"

    def test_delete_unselected_database_stays(self, database_application):
        ctx = RecordingContext()
        DatabaseApplicationType().delete(database_application, ctx)
        assert ctx.calls == []

    def test_prepare_for_store_update_drops_tables(self, database_application):
        data = {"name": "New", "tables": []}
        prepared = DatabaseApplicationType().prepare_for_store_update(database_application, data)
        assert prepared == {"name": "New"}
        assert data == {"name": "New", "tables": []}
