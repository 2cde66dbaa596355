"""Exception classes and error kinds for icsbuilder."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Reason a build or delivery was refused."""

    MISSING_FIELD = "MissingField"
    INVALID_DATE = "InvalidDate"
    INVALID_RECURRENCE_FREQUENCY = "InvalidRecurrenceFrequency"
    INVALID_RECURRENCE_UNTIL = "InvalidRecurrenceUntil"
    INVALID_RECURRENCE_INTERVAL = "InvalidRecurrenceInterval"
    INVALID_RECURRENCE_COUNT = "InvalidRecurrenceCount"
    EMPTY_CALENDAR = "EmptyCalendar"


class ICSBuilderError(Exception):
    """Base exception for icsbuilder."""
    pass


class EventValidationError(ICSBuilderError):
    """Raised when event fields or a recurrence rule fail validation."""

    def __init__(self, kind: ErrorKind, message: str, field: Optional[str] = None):
        self.kind = kind
        self.field = field
        super().__init__(message)


class EmptyCalendarError(ICSBuilderError):
    """Raised when a calendar with no events is delivered."""

    def __init__(self, message: str = "Calendar has no events to deliver"):
        self.kind = ErrorKind.EMPTY_CALENDAR
        super().__init__(message)


class ConfigurationError(ICSBuilderError):
    """Raised for an invalid configuration value."""
    pass


class DeliveryError(ICSBuilderError):
    """Raised when a sink fails to persist a document."""
    pass
