"""File system delivery for finished calendar documents."""

import logging
import os
from pathlib import Path
from typing import Union

from icsbuilder.config.constants import DEFAULT_ENCODING
from icsbuilder.exceptions.errors import DeliveryError

logger = logging.getLogger(__name__)


def harden_file_permissions(path: Path) -> None:
    """Best-effort: restrict permissions to the current user on POSIX.

    Args:
        path: Path to the file to secure.
    """
    if os.name != "posix":
        return
    try:
        path.chmod(0o600)
    except OSError as e:
        logger.warning("Could not tighten permissions on %s: %s", path, e)


class FileSink:
    """Write calendar documents into a directory.

    Instances are callable with ``(document, filename, extension)`` so they
    can be passed straight to ``ICSCalendar.download``.
    """

    def __init__(self, directory: Union[str, Path] = ".", encoding: str = DEFAULT_ENCODING):
        self.directory = Path(directory)
        self.encoding = encoding

    def __call__(self, document: str, filename: str, extension: str) -> Path:
        """Write the document and return the path written.

        Raises:
            DeliveryError: If the directory or file cannot be written.
        """
        path = self.directory / f"{filename}{extension}"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the configured line separator byte-for-byte
            with open(path, "w", encoding=self.encoding, newline="") as handle:
                handle.write(document)
        except OSError as exc:
            raise DeliveryError(f"Failed to write calendar to {path}: {exc}") from exc

        harden_file_permissions(path)
        logger.info("Wrote calendar to %s", path)
        return path
