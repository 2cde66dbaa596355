"""Core business logic for icsbuilder."""

from icsbuilder.core.calendar import DeliveryResult, ICSCalendar
from icsbuilder.core.escaping import escape_text
from icsbuilder.core.event_builder import EventBuildResult, build_event
from icsbuilder.core.recurrence import Frequency, RecurrenceRule, build_rrule

__all__ = [
    "DeliveryResult",
    "ICSCalendar",
    "escape_text",
    "EventBuildResult",
    "build_event",
    "Frequency",
    "RecurrenceRule",
    "build_rrule",
]
