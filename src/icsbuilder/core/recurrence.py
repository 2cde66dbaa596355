"""Recurrence rule validation and RRULE line rendering."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from icsbuilder.config.constants import DEFAULT_NAIVE_TIMEZONE, RRULE_PREFIX
from icsbuilder.core.date_format import DateInput, format_until, parse_datetime
from icsbuilder.exceptions.errors import ErrorKind, EventValidationError

logger = logging.getLogger(__name__)


class Frequency(str, Enum):
    """Recognised FREQ values."""

    YEARLY = "YEARLY"
    MONTHLY = "MONTHLY"
    WEEKLY = "WEEKLY"
    DAILY = "DAILY"


@dataclass
class RecurrenceRule:
    """Structured recurrence rule, validated before rendering."""

    frequency: Union[Frequency, str, None]
    until: Optional[DateInput] = None
    interval: Optional[Union[int, str]] = None
    count: Optional[Union[int, str]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RecurrenceRule":
        """Create a rule from a mapping.

        Both ``frequency`` and the short ``freq`` key are accepted.

        Args:
            data: Mapping of rule parts.

        Returns:
            An unvalidated RecurrenceRule.
        """
        frequency = data.get("frequency")
        if frequency is None:
            frequency = data.get("freq")
        return cls(
            frequency=frequency,
            until=data.get("until"),
            interval=data.get("interval"),
            count=data.get("count"),
        )


RecurrenceInput = Union[str, RecurrenceRule, Mapping[str, Any], None]


def _is_absent(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_positive_integer(value, kind: ErrorKind, name: str) -> int:
    message = f"Recurrence rule '{name}' must be a positive integer"
    if isinstance(value, bool):
        raise EventValidationError(kind, message, name)
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except (TypeError, ValueError):
            raise EventValidationError(kind, message, name) from None
    # RFC 5545 INTERVAL and COUNT are 1 or more
    if number < 1:
        raise EventValidationError(kind, message, name)
    return number


def _validate_frequency(frequency) -> Frequency:
    if isinstance(frequency, Frequency):
        return frequency
    try:
        return Frequency(frequency)
    except ValueError:
        raise EventValidationError(
            ErrorKind.INVALID_RECURRENCE_FREQUENCY,
            "Recurrence rule frequency must be provided and be one of the following: "
            "'YEARLY', 'MONTHLY', 'WEEKLY', or 'DAILY'",
            "frequency",
        ) from None


def render_rule(rule: RecurrenceRule, naive_timezone: str = DEFAULT_NAIVE_TIMEZONE) -> str:
    """Validate a structured rule and render its RRULE line.

    Parts are emitted in the fixed order FREQ, UNTIL, INTERVAL, COUNT.

    Args:
        rule: The rule to render.
        naive_timezone: Zone used for a naive ``until`` date-time.

    Returns:
        The RRULE line, e.g. ``RRULE:FREQ=WEEKLY;INTERVAL=2;COUNT=10``.

    Raises:
        EventValidationError: If any part fails validation.
    """
    frequency = _validate_frequency(rule.frequency)
    parts = [RRULE_PREFIX + frequency.value]

    if not _is_absent(rule.until):
        try:
            until = parse_datetime(rule.until, naive_timezone)
        except ValueError:
            raise EventValidationError(
                ErrorKind.INVALID_RECURRENCE_UNTIL,
                "Recurrence rule 'until' must be a valid date string",
                "until",
            ) from None
        parts.append(f";UNTIL={format_until(until)}")

    if not _is_absent(rule.interval):
        interval = _parse_positive_integer(rule.interval, ErrorKind.INVALID_RECURRENCE_INTERVAL, "interval")
        parts.append(f";INTERVAL={interval}")

    if not _is_absent(rule.count):
        count = _parse_positive_integer(rule.count, ErrorKind.INVALID_RECURRENCE_COUNT, "count")
        parts.append(f";COUNT={count}")

    return "".join(parts)


def build_rrule(recurrence: RecurrenceInput, naive_timezone: str = DEFAULT_NAIVE_TIMEZONE) -> Optional[str]:
    """Turn any accepted recurrence input into an RRULE line.

    A plain string, or a mapping carrying a ``rule`` key, is a pre-formatted
    line and is returned verbatim without validation.

    Args:
        recurrence: None, a raw rule line, a mapping, or a RecurrenceRule.
        naive_timezone: Zone used for a naive ``until`` date-time.

    Returns:
        The RRULE line, or None when no recurrence was given.

    Raises:
        EventValidationError: If a structured rule fails validation.
    """
    if recurrence is None:
        return None

    if isinstance(recurrence, str):
        return recurrence or None

    if isinstance(recurrence, Mapping):
        raw_rule = recurrence.get("rule")
        if raw_rule:
            return str(raw_rule)
        recurrence = RecurrenceRule.from_dict(recurrence)

    if not isinstance(recurrence, RecurrenceRule):
        raise EventValidationError(
            ErrorKind.INVALID_RECURRENCE_FREQUENCY,
            f"Unsupported recurrence value: {recurrence!r}",
            "frequency",
        )

    rrule = render_rule(recurrence, naive_timezone)
    logger.debug("Rendered recurrence rule %s", rrule)
    return rrule
