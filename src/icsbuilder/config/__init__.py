"""Configuration module for icsbuilder."""

from icsbuilder.config.settings import DEFAULT_CONFIG, CalendarConfig
from icsbuilder.config.constants import (
    CRLF,
    LF,
    LINE_ENDINGS,
    RRULE_FREQUENCIES,
    DEFAULT_FILENAME,
    DEFAULT_EXTENSION,
)

__all__ = [
    "DEFAULT_CONFIG",
    "CalendarConfig",
    "CRLF",
    "LF",
    "LINE_ENDINGS",
    "RRULE_FREQUENCIES",
    "DEFAULT_FILENAME",
    "DEFAULT_EXTENSION",
]
