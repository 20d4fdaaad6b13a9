"""apptypes data models — all Pydantic v2, all frozen (immutable)."""

from apptypes.models.descriptor import (
    ApplicationTypeIdentity,
    DependentRecord,
    SerializedApplicationType,
)

__all__ = [
    "ApplicationTypeIdentity",
    "DependentRecord",
    "SerializedApplicationType",
]
