"""
icsbuilder - iCalendar document builder

Formats event descriptions into VEVENT records, with all-day and timed
dates, recurrence rules and TEXT escaping, and assembles them into a
VCALENDAR document.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from icsbuilder.config.settings import DEFAULT_CONFIG, CalendarConfig
from icsbuilder.exceptions.errors import (
    ErrorKind,
    ICSBuilderError,
    EventValidationError,
    EmptyCalendarError,
    ConfigurationError,
    DeliveryError,
)
from icsbuilder.core.calendar import DeliveryResult, ICSCalendar
from icsbuilder.core.escaping import escape_text
from icsbuilder.core.event_builder import EventBuildResult, build_event
from icsbuilder.core.recurrence import Frequency, RecurrenceRule
from icsbuilder.storage.file_sink import FileSink

__all__ = [
    # Version
    "__version__",
    # Config
    "DEFAULT_CONFIG",
    "CalendarConfig",
    # Exceptions
    "ErrorKind",
    "ICSBuilderError",
    "EventValidationError",
    "EmptyCalendarError",
    "ConfigurationError",
    "DeliveryError",
    # Core
    "DeliveryResult",
    "ICSCalendar",
    "escape_text",
    "EventBuildResult",
    "build_event",
    "Frequency",
    "RecurrenceRule",
    # Storage
    "FileSink",
]
