"""Timezone resolution utilities."""

import logging
from datetime import datetime

import pytz
import tzlocal

from icsbuilder.config.constants import DEFAULT_NAIVE_TIMEZONE
from icsbuilder.exceptions.errors import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_timezone(tz_name: str):
    """Resolve a zone name to a pytz timezone.

    Args:
        tz_name: An IANA zone name, "UTC", or "local" for the host zone.

    Returns:
        A pytz timezone object.

    Raises:
        ConfigurationError: If the name is not a known zone.
    """
    name = tz_name or DEFAULT_NAIVE_TIMEZONE
    if name.upper() == "LOCAL":
        local_tz_obj = tzlocal.get_localzone()
        name = getattr(local_tz_obj, "zone", None) or getattr(local_tz_obj, "key", str(local_tz_obj))
        logger.debug("Resolved local timezone to %s", name)

    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as exc:
        raise ConfigurationError(f"Unknown timezone: {tz_name!r}") from exc


def attach_timezone(tzobj, naive_dt: datetime) -> datetime:
    """Return a timezone-aware datetime, honouring DST rules.

    Args:
        tzobj: A pytz timezone.
        naive_dt: A datetime without tzinfo.

    Returns:
        The localised datetime.
    """
    try:
        return tzobj.localize(naive_dt, is_dst=None)
    except (pytz.AmbiguousTimeError, pytz.NonExistentTimeError):
        # Pick the earlier offset rather than failing on DST transitions
        return tzobj.localize(naive_dt, is_dst=True)
