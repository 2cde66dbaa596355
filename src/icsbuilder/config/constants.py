"""Centralized constants for icsbuilder.

Fixed iCalendar tags and the defaults that ``CalendarConfig`` starts from.
"""

# Line separators
LF = "\n"
CRLF = "\r\n"
LINE_ENDINGS = {
    "lf": LF,
    "crlf": CRLF,
}

# ICS calendar constants
ICS_BEGIN_CALENDAR = "BEGIN:VCALENDAR"
ICS_VERSION = "VERSION:2.0"
ICS_END_CALENDAR = "END:VCALENDAR"

# VEVENT tags, in the order they are emitted
ICS_BEGIN_EVENT = "BEGIN:VEVENT"
ICS_CLASS = "CLASS:PUBLIC"
ICS_DESCRIPTION = "DESCRIPTION"
ICS_DTSTART = "DTSTART"
ICS_DTEND = "DTEND"
ICS_LOCATION = "LOCATION"
ICS_SUMMARY = "SUMMARY"
ICS_END_EVENT = "END:VEVENT"
ICS_VALUE_DATE = ";VALUE=DATE"

# Recurrence rule constants
RRULE_PREFIX = "RRULE:FREQ="
RRULE_FREQUENCIES = ("YEARLY", "MONTHLY", "WEEKLY", "DAILY")
RRULE_UNTIL_TIME = "T000000Z"

# Timestamp formats (applied to UTC datetimes)
ICS_DATE_FORMAT = "%Y%m%d"
ICS_DATETIME_FORMAT = "%Y%m%d%H%M%SZ"
ICS_RFC_DATETIME_FORMAT = "%Y%m%dT%H%M%SZ"

# Delivery defaults
DEFAULT_FILENAME = "calendar"
DEFAULT_EXTENSION = ".ics"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LANGUAGE = "en-us"
DEFAULT_NAIVE_TIMEZONE = "UTC"

# Environment variable names read by CalendarConfig.from_env
ENV_LINE_ENDING = "ICS_LINE_ENDING"
ENV_LANGUAGE = "ICS_LANGUAGE"
ENV_NAIVE_TIMEZONE = "ICS_NAIVE_TIMEZONE"
ENV_DEFAULT_FILENAME = "ICS_DEFAULT_FILENAME"
ENV_DEFAULT_EXTENSION = "ICS_DEFAULT_EXTENSION"
ENV_RFC_TIMESTAMPS = "ICS_RFC_TIMESTAMPS"

# Spellings accepted for boolean flags
TRUE_FLAGS = ("1", "true", "yes", "on")
FALSE_FLAGS = ("0", "false", "no", "off", "")

# Required event fields, in argument order
REQUIRED_EVENT_FIELDS = ("subject", "description", "location", "begin", "stop")

# Accepted date string formats besides ISO 8601
DATE_ONLY_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%Y%m%d")
DATETIME_FORMATS = (
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
)
