"""Delivery sinks for icsbuilder."""

from icsbuilder.storage.base import CalendarSink
from icsbuilder.storage.file_sink import FileSink, harden_file_permissions

__all__ = [
    "CalendarSink",
    "FileSink",
    "harden_file_permissions",
]
