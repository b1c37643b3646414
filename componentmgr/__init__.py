"""Manage a local library of frontend components: export, import, list and dependency commands."""

__version__ = "0.1.0"