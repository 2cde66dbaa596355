"""VEVENT record building."""

import logging
from dataclasses import dataclass
from typing import Optional

from icsbuilder.config.constants import (
    ICS_BEGIN_EVENT,
    ICS_CLASS,
    ICS_DESCRIPTION,
    ICS_DTEND,
    ICS_DTSTART,
    ICS_END_EVENT,
    ICS_LOCATION,
    ICS_SUMMARY,
    ICS_VALUE_DATE,
    REQUIRED_EVENT_FIELDS,
)
from icsbuilder.config.settings import DEFAULT_CONFIG, CalendarConfig
from icsbuilder.core.date_format import (
    DateInput,
    add_days,
    format_date,
    format_datetime,
    parse_datetime,
)
from icsbuilder.core.escaping import escape_text
from icsbuilder.core.recurrence import RecurrenceInput, build_rrule
from icsbuilder.exceptions.errors import ErrorKind, EventValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventBuildResult:
    """Result of building a VEVENT record."""
    success: bool
    ics_content: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    def raise_for_error(self) -> str:
        """Return the record, or raise EventValidationError for a failed build."""
        if not self.success:
            raise EventValidationError(self.error, self.message or self.error.value)
        return self.ics_content


def _validate_required_fields(**fields) -> None:
    """Raise for the first required field that is absent.

    Presence means "not None"; empty strings are accepted.
    """
    for name in REQUIRED_EVENT_FIELDS:
        if fields.get(name) is None:
            raise EventValidationError(
                ErrorKind.MISSING_FIELD,
                f"Missing required field: {name}",
                name,
            )


def _parse_event_dates(begin: DateInput, stop: DateInput, naive_timezone: str):
    parsed = []
    for name, value in (("begin", begin), ("stop", stop)):
        try:
            parsed.append(parse_datetime(value, naive_timezone))
        except ValueError as exc:
            raise EventValidationError(
                ErrorKind.INVALID_DATE,
                f"Field '{name}' is not a valid date: {exc}",
                name,
            ) from None
    return parsed


def _format_event_lines(
    subject: str,
    description: str,
    location: str,
    start: str,
    end: str,
    is_all_day: bool,
    rrule: Optional[str],
    config: CalendarConfig,
) -> str:
    value_param = ICS_VALUE_DATE if is_all_day else ""
    lines = [
        ICS_BEGIN_EVENT,
        ICS_CLASS,
        f"{ICS_DESCRIPTION}:{escape_text(description)}",
        f"{ICS_DTSTART}{value_param}:{start}",
        f"{ICS_DTEND}{value_param}:{end}",
        f"{ICS_LOCATION}:{escape_text(location)}",
        f"{ICS_SUMMARY};LANGUAGE={config.language}:{escape_text(subject)}",
        ICS_END_EVENT,
    ]

    # RRULE always sits directly after DESCRIPTION
    if rrule:
        lines.insert(3, rrule)

    return config.line_separator.join(lines)


def build_event(
    subject: Optional[str] = None,
    description: Optional[str] = None,
    location: Optional[str] = None,
    begin: Optional[DateInput] = None,
    stop: Optional[DateInput] = None,
    is_all_day: bool = False,
    recurrence: RecurrenceInput = None,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> EventBuildResult:
    """Validate event fields and format them into a VEVENT record.

    All-day events are written as bare dates with one day added to the end,
    since DTEND is exclusive. Timed events are written as UTC timestamps,
    ``YYYYMMDDHHMMSSZ`` unless ``config.rfc_timestamps`` asks for the T form.
    Free-text fields are escaped once here; pass them unescaped.

    Args:
        subject: Title of the event (SUMMARY).
        description: Description of the event.
        location: Location of the event.
        begin: Start date or date-time.
        stop: End date or date-time.
        is_all_day: Whether the event spans whole days.
        recurrence: Optional raw RRULE line, mapping, or RecurrenceRule.
        config: Output configuration.

    Returns:
        EventBuildResult holding the record, or the error kind on failure.
    """
    try:
        _validate_required_fields(
            subject=subject,
            description=description,
            location=location,
            begin=begin,
            stop=stop,
        )

        rrule = build_rrule(recurrence, config.naive_timezone)

        start_dt, end_dt = _parse_event_dates(begin, stop, config.naive_timezone)

        if is_all_day:
            end_dt = add_days(end_dt, 1)
            start = format_date(start_dt)
            end = format_date(end_dt)
        else:
            start = format_datetime(start_dt, config.rfc_timestamps)
            end = format_datetime(end_dt, config.rfc_timestamps)

        ics_content = _format_event_lines(
            subject, description, location, start, end, is_all_day, rrule, config
        )
        return EventBuildResult(success=True, ics_content=ics_content)

    except EventValidationError as e:
        logger.warning("Rejected event '%s': %s", subject if subject is not None else "Unknown", e)
        return EventBuildResult(success=False, error=e.kind, message=str(e))
