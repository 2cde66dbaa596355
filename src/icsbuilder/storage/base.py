"""Sink interface for delivering calendar documents."""

from typing import Any, Protocol


class CalendarSink(Protocol):
    """Anything that accepts a finished document for delivery."""

    def __call__(self, document: str, filename: str, extension: str) -> Any:
        ...
