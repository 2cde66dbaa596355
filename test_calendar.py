"""Tests for calendar assembly and delivery."""

import unittest
from unittest.mock import Mock

import pytest
from icalendar import Calendar

from icsbuilder import (
    CalendarConfig,
    EmptyCalendarError,
    ErrorKind,
    ICSCalendar,
    build_event,
)
from icsbuilder.config.constants import CRLF

CHRISTMAS = ("Christmas", "Christian holiday celebrating the birth of Jesus Christ", "Bethlehem")


class TestICSCalendar(unittest.TestCase):
    """Behaviour of a single calendar instance."""

    def setUp(self):
        self.cal = ICSCalendar()

    def test_empty_calendar_document(self):
        self.assertEqual(self.cal.events(), ())
        self.assertEqual(len(self.cal), 0)
        self.assertEqual(self.cal.calendar(), "BEGIN:VCALENDAR\nVERSION:2.0\n\nEND:VCALENDAR")

    def test_add_one_all_day_event(self):
        result = self.cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)

        self.assertTrue(result.success)
        self.assertEqual(self.cal.events(), (result.ics_content,))
        self.assertIn("DTSTART;VALUE=DATE:20131225", result.ics_content)
        self.assertIn("DTEND;VALUE=DATE:20131226", result.ics_content)
        self.assertEqual(
            self.cal.calendar(),
            "BEGIN:VCALENDAR\nVERSION:2.0\n" + result.ics_content + "\nEND:VCALENDAR",
        )

    def test_recurring_event(self):
        result = self.cal.add_event(
            "Soccer Practice", "Practice kicking the ball in the net!  YAYY!!", "Soccer field",
            "08/18/2014", "09/18/2014",
            recurrence={"frequency": "WEEKLY", "interval": 2, "count": 10},
        )

        self.assertIn("\nRRULE:FREQ=WEEKLY;INTERVAL=2;COUNT=10\n", self.cal.events()[0])
        self.assertTrue(result.success)

    def test_missing_location_leaves_calendar_unchanged(self):
        self.cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)
        before = self.cal.calendar()

        result = self.cal.add_event("Easter", "Holiday", None, "2014-04-20", "2014-04-20")

        self.assertFalse(result.success)
        self.assertEqual(result.error, ErrorKind.MISSING_FIELD)
        self.assertEqual(len(self.cal), 1)
        self.assertEqual(self.cal.calendar(), before)

    def test_invalid_recurrence_leaves_calendar_unchanged(self):
        result = self.cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", recurrence={"freq": "HOURLY"})

        self.assertEqual(result.error, ErrorKind.INVALID_RECURRENCE_FREQUENCY)
        self.assertEqual(len(self.cal), 0)

    def test_calendar_is_idempotent(self):
        self.cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)

        self.assertEqual(self.cal.calendar(), self.cal.calendar())

    def test_events_keep_insertion_order(self):
        self.cal.add_event("Later", "b", "x", "2015-01-01", "2015-01-01", is_all_day=True)
        self.cal.add_event("Earlier", "a", "y", "2013-01-01", "2013-01-01", is_all_day=True)
        self.cal.add_event("Later", "b", "x", "2015-01-01", "2015-01-01", is_all_day=True)

        events = self.cal.events()
        self.assertEqual(len(events), 3)
        self.assertIn("SUMMARY;LANGUAGE=en-us:Later", events[0])
        self.assertIn("SUMMARY;LANGUAGE=en-us:Earlier", events[1])
        self.assertEqual(events[0], events[2])

    def test_events_snapshot_is_not_affected_by_later_appends(self):
        snapshot = self.cal.events()
        self.cal.append("BEGIN:VEVENT\nEND:VEVENT")

        self.assertEqual(snapshot, ())
        self.assertEqual(len(self.cal.events()), 1)

    def test_append_prebuilt_record(self):
        record = build_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True).ics_content
        self.cal.append(record)

        self.assertEqual(self.cal.events(), (record,))


def test_calendars_are_independent() -> None:
    first = ICSCalendar()
    second = ICSCalendar()

    first.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)

    assert len(first) == 1
    assert len(second) == 0


def test_crlf_separator() -> None:
    cal = ICSCalendar(CalendarConfig(line_separator=CRLF))

    assert cal.calendar() == "BEGIN:VCALENDAR\r\nVERSION:2.0\r\n\r\nEND:VCALENDAR"

    cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)
    assert "\n" not in cal.calendar().replace("\r\n", "")


def test_document_parses_with_icalendar() -> None:
    cal = ICSCalendar(CalendarConfig(line_separator=CRLF, rfc_timestamps=True))
    cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)
    cal.add_event(
        "Soccer Practice", "Bring water, cones; and\nballs", "Soccer field",
        "2014-08-18T17:00:00Z", "2014-08-18T18:30:00Z",
        recurrence={"frequency": "WEEKLY", "until": "2014-12-01"},
    )

    parsed = Calendar.from_ical(cal.calendar())
    vevents = list(parsed.walk("VEVENT"))

    assert len(vevents) == 2
    assert vevents[0].decoded("DTSTART").isoformat() == "2013-12-25"
    assert vevents[0].decoded("DTEND").isoformat() == "2013-12-26"
    assert str(vevents[1]["DESCRIPTION"]) == "Bring water, cones; and\nballs"
    assert vevents[1]["RRULE"]["FREQ"] == ["WEEKLY"]
    assert vevents[1].decoded("DTSTART").isoformat() == "2014-08-18T17:00:00+00:00"


def test_download_empty_calendar_fails_without_calling_sink() -> None:
    cal = ICSCalendar()
    sink = Mock()

    result = cal.download(sink)

    assert not result.success
    assert result.error is ErrorKind.EMPTY_CALENDAR
    sink.assert_not_called()
    with pytest.raises(EmptyCalendarError):
        result.raise_for_error()


def test_download_passes_document_and_defaults_to_sink() -> None:
    cal = ICSCalendar()
    cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)
    sink = Mock(return_value="saved")

    result = cal.download(sink)

    sink.assert_called_once_with(cal.calendar(), "calendar", ".ics")
    assert result.success
    assert result.document == cal.calendar()
    assert result.sink_result == "saved"
    assert result.raise_for_error() == cal.calendar()


def test_download_with_explicit_name() -> None:
    cal = ICSCalendar(CalendarConfig(default_filename="holidays", default_extension=".ical"))
    cal.add_event(*CHRISTMAS, "2013-12-25", "2013-12-25", is_all_day=True)
    sink = Mock()

    cal.download(sink)
    sink.assert_called_with(cal.calendar(), "holidays", ".ical")

    cal.download(sink, filename="xmas", ext=".ics")
    sink.assert_called_with(cal.calendar(), "xmas", ".ics")


def test_sink_protocol_is_exported_from_storage() -> None:
    from icsbuilder.storage import CalendarSink, FileSink

    sink: CalendarSink = FileSink(".")
    assert callable(sink)
