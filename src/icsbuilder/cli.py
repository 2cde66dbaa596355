"""Command-line interface for icsbuilder."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from icsbuilder.config.constants import CRLF
from icsbuilder.config.settings import CalendarConfig, parse_flag
from icsbuilder.core.calendar import ICSCalendar
from icsbuilder.exceptions.errors import ConfigurationError, DeliveryError
from icsbuilder.storage.file_sink import FileSink

app = typer.Typer(
    name="icsbuilder",
    help="Build iCalendar (.ics) files from JSON event descriptions",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _load_config(env_file: Optional[Path], crlf: bool, rfc_timestamps: bool) -> CalendarConfig:
    try:
        config = CalendarConfig.from_env(env_file)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    if crlf:
        config = dataclasses.replace(config, line_separator=CRLF)
    if rfc_timestamps:
        config = dataclasses.replace(config, rfc_timestamps=True)
    return config


def _load_calendar(events_file: Path, config: CalendarConfig) -> ICSCalendar:
    """Read a JSON list of events and add each one to a new calendar.

    Events that fail validation are logged and skipped.
    """
    try:
        raw = json.loads(events_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Error: could not read {events_file}: {e}", err=True)
        raise typer.Exit(1)

    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        typer.echo("Error: expected a JSON list of events", err=True)
        raise typer.Exit(1)

    calendar = ICSCalendar(config)
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            logger.warning("Skipping event %d: not a JSON object", index + 1)
            continue
        try:
            is_all_day = parse_flag(item.get("all_day", False))
        except ValueError as e:
            logger.warning("Skipping event %d: all_day %s", index + 1, e)
            continue
        result = calendar.add_event(
            subject=item.get("subject"),
            description=item.get("description"),
            location=item.get("location"),
            begin=item.get("begin"),
            stop=item.get("stop"),
            is_all_day=is_all_day,
            recurrence=item.get("recurrence"),
        )
        if not result.success:
            logger.warning("Skipping event %d (%s): %s", index + 1, result.error.value, result.message)

    logger.info("Loaded %d of %d event(s)", len(calendar), len(raw))
    return calendar


@app.command()
def build(
    events_file: Path = typer.Argument(..., help="JSON file with a list of events"),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", help="Directory to write into"),
    filename: Optional[str] = typer.Option(None, "--filename", "-f", help="File name without extension"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help=".env file with ICS_* settings"),
    crlf: bool = typer.Option(False, "--crlf", help="Use CRLF line endings"),
    rfc_timestamps: bool = typer.Option(False, "--rfc-timestamps", help="Write timed values as YYYYMMDDTHHMMSSZ"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Build a calendar file from a JSON list of events."""
    setup_logging(verbose)

    config = _load_config(env_file, crlf, rfc_timestamps)
    calendar = _load_calendar(events_file, config)

    sink = FileSink(output_dir, encoding=config.encoding)
    try:
        result = calendar.download(sink, filename=filename)
    except DeliveryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not result.success:
        typer.echo("Error: no valid events to write", err=True)
        raise typer.Exit(1)

    typer.echo(str(result.sink_result))


@app.command()
def preview(
    events_file: Path = typer.Argument(..., help="JSON file with a list of events"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help=".env file with ICS_* settings"),
    crlf: bool = typer.Option(False, "--crlf", help="Use CRLF line endings"),
    rfc_timestamps: bool = typer.Option(False, "--rfc-timestamps", help="Write timed values as YYYYMMDDTHHMMSSZ"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print the calendar document without writing a file."""
    setup_logging(verbose)

    config = _load_config(env_file, crlf, rfc_timestamps)
    calendar = _load_calendar(events_file, config)
    typer.echo(calendar.calendar())


if __name__ == "__main__":
    app()
