"""Tests for the application type plugin loader."""

from __future__ import annotations

from importlib.metadata import EntryPoint

import pytest

from apptypes.plugins import loader as loader_module
from apptypes.plugins.loader import ApplicationTypeLoader, import_application_type
from apptypes.registry import ApplicationTypeRegistry, DuplicateTypeError
from apptypes.types.base import ConfigurationError
from sample_plugins import SimpleApplicationType


class TestImportApplicationType:
    def test_resolves_class(self):
        assert import_application_type("sample_plugins:SimpleApplicationType") is SimpleApplicationType

    @pytest.mark.parametrize("path", ["sample_plugins", ":Simple", "sample_plugins:"])
    def test_malformed_path(self, path):
        with pytest.raises(ValueError, match="module:ClassName"):
            import_application_type(path)

    def test_not_a_subclass(self):
        with pytest.raises(TypeError):
            import_application_type("sample_plugins:NotAnApplicationType")

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            import_application_type("sample_plugins:DoesNotExist")


class TestLoader:
    def test_load_registers(self):
        registry = ApplicationTypeRegistry()
        descriptor = ApplicationTypeLoader(registry).load("sample_plugins:SimpleApplicationType")
        assert registry.get("simple") is descriptor

    def test_strict_mode_propagates_and_registers_nothing(self):
        registry = ApplicationTypeRegistry()
        loader = ApplicationTypeLoader(registry)
        with pytest.raises(ConfigurationError, match="name must be set"):
            loader.load_paths([
                "sample_plugins:SimpleApplicationType",
                "sample_plugins:NamelessApplicationType",
            ])
        assert not registry.exists("nameless")
        assert len(registry) == 1

    def test_lenient_mode_skips_invalid(self, caplog):
        registry = ApplicationTypeRegistry()
        loader = ApplicationTypeLoader(registry, strict=False)
        loaded = loader.load_paths([
            "sample_plugins:NamelessApplicationType",
            "sample_plugins:SimpleApplicationType",
        ])
        assert [d.type for d in loaded] == ["simple"]
        assert loader.skipped == ["sample_plugins:NamelessApplicationType"]
        assert "Skipping application type plugin" in caplog.text

    def test_lenient_mode_skips_non_string_identity(self):
        registry = ApplicationTypeRegistry()
        loader = ApplicationTypeLoader(registry, strict=False)
        loaded = loader.load_paths([
            "sample_plugins:LabelObjectApplicationType",
            "sample_plugins:SimpleApplicationType",
        ])
        assert [d.type for d in loaded] == ["simple"]
        assert loader.skipped == ["sample_plugins:LabelObjectApplicationType"]

    def test_strict_mode_rejects_non_string_identity(self):
        with pytest.raises(ConfigurationError, match="must be strings"):
            ApplicationTypeLoader(ApplicationTypeRegistry()).load(
                "sample_plugins:LabelObjectApplicationType"
            )

    def test_duplicates_always_propagate(self):
        registry = ApplicationTypeRegistry()
        loader = ApplicationTypeLoader(registry, strict=False)
        loader.load("sample_plugins:SimpleApplicationType")
        with pytest.raises(DuplicateTypeError):
            loader.load("sample_plugins:SimpleApplicationType")


class TestEntryPoints:
    def test_loads_group(self, monkeypatch):
        seen: list[str] = []

        def fake_entry_points(group):
            seen.append(group)
            return [
                EntryPoint(
                    name="simple",
                    value="sample_plugins:SimpleApplicationType",
                    group=group,
                ),
            ]

        monkeypatch.setattr(loader_module, "entry_points", fake_entry_points)
        registry = ApplicationTypeRegistry()
        loaded = ApplicationTypeLoader(registry).load_entry_points("custom.group")
        assert seen == ["custom.group"]
        assert [d.type for d in loaded] == ["simple"]
        assert registry.exists("simple")

    def test_rejects_non_descriptor_entry_point(self, monkeypatch):
        monkeypatch.setattr(
            loader_module,
            "entry_points",
            lambda group: [
                EntryPoint(name="bad", value="sample_plugins:NotAnApplicationType", group=group),
            ],
        )
        with pytest.raises(TypeError, match="not an ApplicationType"):
            ApplicationTypeLoader(ApplicationTypeRegistry()).load_entry_points()
