"""Runtime configuration for calendar output."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from icsbuilder.config.constants import (
    DEFAULT_ENCODING,
    DEFAULT_EXTENSION,
    DEFAULT_FILENAME,
    DEFAULT_LANGUAGE,
    DEFAULT_NAIVE_TIMEZONE,
    ENV_DEFAULT_EXTENSION,
    ENV_DEFAULT_FILENAME,
    ENV_LANGUAGE,
    ENV_LINE_ENDING,
    ENV_NAIVE_TIMEZONE,
    ENV_RFC_TIMESTAMPS,
    FALSE_FLAGS,
    LF,
    LINE_ENDINGS,
    TRUE_FLAGS,
)
from icsbuilder.exceptions.errors import ConfigurationError
from icsbuilder.utils.timezone_utils import resolve_timezone

logger = logging.getLogger(__name__)


def parse_flag(value) -> bool:
    """Interpret a boolean flag given as a bool or a common string spelling.

    Raises:
        ValueError: If the value is neither a bool nor a known spelling.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_FLAGS:
            return True
        if text in FALSE_FLAGS:
            return False
    raise ValueError(f"Not a boolean flag: {value!r}")


@dataclass(frozen=True)
class CalendarConfig:
    """Settings shared by the event builder and the calendar assembler.

    Attributes:
        line_separator: Separator placed between output lines.
        language: Value of the SUMMARY LANGUAGE parameter.
        naive_timezone: Zone used for date-times without tzinfo
            ("local" means the host zone).
        default_filename: File name used when delivery gives none.
        default_extension: Extension used when delivery gives none.
        encoding: Encoding used when the document is written out.
        rfc_timestamps: Write timed values as YYYYMMDDTHHMMSSZ instead of
            YYYYMMDDHHMMSSZ.
    """

    line_separator: str = LF
    language: str = DEFAULT_LANGUAGE
    naive_timezone: str = DEFAULT_NAIVE_TIMEZONE
    default_filename: str = DEFAULT_FILENAME
    default_extension: str = DEFAULT_EXTENSION
    encoding: str = DEFAULT_ENCODING
    rfc_timestamps: bool = False

    def __post_init__(self):
        if self.line_separator not in LINE_ENDINGS.values():
            raise ConfigurationError(
                f"Unsupported line separator: {self.line_separator!r}"
            )
        # Fail here rather than on the first naive date-time
        resolve_timezone(self.naive_timezone)

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "CalendarConfig":
        """Build a config from an optional .env file and the process environment.

        Process environment values win over the file. The file is parsed
        without mutating os.environ.

        Args:
            env_file: Optional path to a .env file.

        Returns:
            A CalendarConfig with overrides applied.

        Raises:
            ConfigurationError: If ICS_LINE_ENDING names an unknown ending,
                ICS_NAIVE_TIMEZONE an unknown zone, or ICS_RFC_TIMESTAMPS
                is not a boolean.
        """
        values: Dict[str, Optional[str]] = {}
        if env_file is not None:
            path = Path(env_file)
            if path.exists():
                values.update(dotenv_values(path))
            else:
                logger.warning("Config file %s not found, using defaults", path)

        for name in (
            ENV_LINE_ENDING,
            ENV_LANGUAGE,
            ENV_NAIVE_TIMEZONE,
            ENV_DEFAULT_FILENAME,
            ENV_DEFAULT_EXTENSION,
            ENV_RFC_TIMESTAMPS,
        ):
            if name in os.environ:
                values[name] = os.environ[name]

        overrides = {}

        line_ending = values.get(ENV_LINE_ENDING)
        if line_ending:
            key = line_ending.strip().lower()
            if key not in LINE_ENDINGS:
                raise ConfigurationError(
                    f"{ENV_LINE_ENDING} must be one of {sorted(LINE_ENDINGS)}, got {line_ending!r}"
                )
            overrides["line_separator"] = LINE_ENDINGS[key]

        for env_name, field_name in (
            (ENV_LANGUAGE, "language"),
            (ENV_NAIVE_TIMEZONE, "naive_timezone"),
            (ENV_DEFAULT_FILENAME, "default_filename"),
            (ENV_DEFAULT_EXTENSION, "default_extension"),
        ):
            value = values.get(env_name)
            if value:
                overrides[field_name] = value.strip()

        rfc_timestamps = values.get(ENV_RFC_TIMESTAMPS)
        if rfc_timestamps is not None:
            try:
                overrides["rfc_timestamps"] = parse_flag(rfc_timestamps)
            except ValueError as exc:
                raise ConfigurationError(f"{ENV_RFC_TIMESTAMPS}: {exc}") from None

        return cls(**overrides)


DEFAULT_CONFIG = CalendarConfig()
