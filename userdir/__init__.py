"""Browsable user directory: search, sort, pagination and a detail view."""

__version__ = "0.1.0"
