"""Utility functions for icsbuilder."""

from icsbuilder.utils.timezone_utils import attach_timezone, resolve_timezone

__all__ = [
    "attach_timezone",
    "resolve_timezone",
]
