"""Custom exceptions for icsbuilder."""

from icsbuilder.exceptions.errors import (
    ErrorKind,
    ICSBuilderError,
    EventValidationError,
    EmptyCalendarError,
    ConfigurationError,
    DeliveryError,
)

__all__ = [
    "ErrorKind",
    "ICSBuilderError",
    "EventValidationError",
    "EmptyCalendarError",
    "ConfigurationError",
    "DeliveryError",
]
