"""Calendar assembly: ordered VEVENT records wrapped in a VCALENDAR."""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from icsbuilder.config.constants import (
    ICS_BEGIN_CALENDAR,
    ICS_END_CALENDAR,
    ICS_VERSION,
)
from icsbuilder.config.settings import DEFAULT_CONFIG, CalendarConfig
from icsbuilder.core.date_format import DateInput
from icsbuilder.core.event_builder import EventBuildResult, build_event
from icsbuilder.core.recurrence import RecurrenceInput
from icsbuilder.exceptions.errors import EmptyCalendarError, ErrorKind
from icsbuilder.storage.base import CalendarSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    """Result of handing a calendar document to a sink."""
    success: bool
    document: Optional[str] = None
    sink_result: Any = None
    error: Optional[ErrorKind] = None

    def raise_for_error(self) -> str:
        """Return the delivered document, or raise EmptyCalendarError."""
        if not self.success:
            raise EmptyCalendarError()
        return self.document


class ICSCalendar:
    """An append-only, ordered collection of VEVENT records.

    Each instance is independent; it is meant to be owned by a single writer.
    """

    def __init__(self, config: CalendarConfig = DEFAULT_CONFIG):
        self.config = config
        self._events: List[str] = []

    def __len__(self) -> int:
        return len(self._events)

    def events(self) -> Tuple[str, ...]:
        """Return a snapshot of the records in insertion order."""
        return tuple(self._events)

    def append(self, event: str) -> None:
        """Append an already formatted VEVENT record."""
        self._events.append(event)
        logger.debug("Appended event %d to calendar", len(self._events))

    def calendar(self) -> str:
        """Return the full document, header and footer included.

        Returns:
            The VCALENDAR text; valid even when there are no events.
        """
        sep = self.config.line_separator
        header = sep.join([ICS_BEGIN_CALENDAR, ICS_VERSION])
        return header + sep + sep.join(self._events) + sep + ICS_END_CALENDAR

    def add_event(
        self,
        subject: Optional[str] = None,
        description: Optional[str] = None,
        location: Optional[str] = None,
        begin: Optional[DateInput] = None,
        stop: Optional[DateInput] = None,
        is_all_day: bool = False,
        recurrence: RecurrenceInput = None,
    ) -> EventBuildResult:
        """Build an event and append it on success.

        Failed builds leave the calendar untouched.

        Returns:
            The EventBuildResult from build_event.
        """
        result = build_event(
            subject=subject,
            description=description,
            location=location,
            begin=begin,
            stop=stop,
            is_all_day=is_all_day,
            recurrence=recurrence,
            config=self.config,
        )
        if result.success:
            self.append(result.ics_content)
        return result

    def download(
        self,
        sink: CalendarSink,
        filename: Optional[str] = None,
        ext: Optional[str] = None,
    ) -> DeliveryResult:
        """Hand the document to a sink for delivery.

        Args:
            sink: Callable taking (document, filename, extension).
            filename: File name without extension; config default if None.
            ext: Extension including the dot; config default if None.

        Returns:
            DeliveryResult; an empty calendar fails with EMPTY_CALENDAR and
            the sink is not called.
        """
        if not self._events:
            logger.warning("Nothing to deliver: calendar has no events")
            return DeliveryResult(success=False, error=ErrorKind.EMPTY_CALENDAR)

        filename = filename if filename is not None else self.config.default_filename
        ext = ext if ext is not None else self.config.default_extension
        document = self.calendar()

        sink_result = sink(document, filename, ext)
        logger.info("Delivered calendar with %d event(s) as %s%s", len(self._events), filename, ext)
        return DeliveryResult(success=True, document=document, sink_result=sink_result)
