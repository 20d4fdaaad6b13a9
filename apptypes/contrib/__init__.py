"""Bundled application type plugins."""

from apptypes.contrib.database import DatabaseApplicationType

__all__ = ["DatabaseApplicationType"]
