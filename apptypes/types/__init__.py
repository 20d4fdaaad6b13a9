"""Application type descriptors and their capability protocols."""

from apptypes.types.base import (
    DEFAULT_APPLICATION_FORM,
    ApplicationType,
    ConfigurationError,
    build_identity,
)
from apptypes.types.capabilities import (
    ContextMenuProvider,
    DependentsProvider,
    FormProvider,
    Identity,
    LifecycleParticipant,
    SidebarProvider,
    capabilities_of,
)

__all__ = [
    "ApplicationType",
    "ConfigurationError",
    "DEFAULT_APPLICATION_FORM",
    "build_identity",
    "Identity",
    "FormProvider",
    "SidebarProvider",
    "ContextMenuProvider",
    "DependentsProvider",
    "LifecycleParticipant",
    "capabilities_of",
]
