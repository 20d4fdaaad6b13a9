"""apptypes: registrable application type plugins.

Plugins subclass ``ApplicationType`` to declare their identity, optional UI
capabilities and lifecycle hooks.  Each descriptor validates itself when
constructed and is registered once, under its type key, in an
``ApplicationTypeRegistry``.  Generic host code then dispatches through
``ApplicationLifecycle`` without knowing concrete variants.
"""

__version__ = "0.1.0"
__description__ = "Registrable application type plugins with eager validation"

from apptypes.context import LifecycleContext, RecordingContext
from apptypes.lifecycle import ApplicationLifecycle, DependentsOverview
from apptypes.registry import (
    ApplicationTypeRegistry,
    DuplicateTypeError,
    RegistryFrozenError,
    UnknownTypeError,
)
from apptypes.types.base import ApplicationType, ConfigurationError

__all__ = [
    "ApplicationType",
    "ConfigurationError",
    "ApplicationTypeRegistry",
    "DuplicateTypeError",
    "UnknownTypeError",
    "RegistryFrozenError",
    "ApplicationLifecycle",
    "DependentsOverview",
    "LifecycleContext",
    "RecordingContext",
    "__version__",
]
