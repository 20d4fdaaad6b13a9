"""Application type plugin loading — explicit paths and entry points."""

from apptypes.plugins.loader import (
    DEFAULT_ENTRY_POINT_GROUP,
    ApplicationTypeLoader,
    import_application_type,
)

__all__ = ["ApplicationTypeLoader", "import_application_type", "DEFAULT_ENTRY_POINT_GROUP"]
