"""Tests for capability protocols and capabilities_of()."""

from __future__ import annotations

from apptypes.contrib.database import DatabaseApplicationType
from apptypes.types.capabilities import (
    ContextMenuProvider,
    DependentsProvider,
    FormProvider,
    Identity,
    LifecycleParticipant,
    SidebarProvider,
    capabilities_of,
)
from sample_plugins import SidebarApplicationType


class TestProtocols:
    def test_descriptor_satisfies_all(self, simple_type):
        for protocol in (
            Identity,
            FormProvider,
            SidebarProvider,
            ContextMenuProvider,
            DependentsProvider,
            LifecycleParticipant,
        ):
            assert isinstance(simple_type, protocol)

    def test_plain_object_is_not_a_sidebar_provider(self):
        assert not isinstance(object(), SidebarProvider)


class TestCapabilitiesOf:
    def test_identity_only(self, simple_type):
        assert capabilities_of(simple_type) == []

    def test_sidebar(self):
        assert capabilities_of(SidebarApplicationType()) == ["sidebar"]

    def test_database(self):
        assert capabilities_of(DatabaseApplicationType()) == [
            "sidebar", "context_menu", "dependents",
        ]
