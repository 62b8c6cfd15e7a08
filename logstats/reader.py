"""Whole-file reading: the input is loaded into memory before parsing."""

import logging

from logstats.errors import ReadError

logger = logging.getLogger(__name__)


def read_file(filepath: str) -> bytes:
    """Return the full contents of ``filepath``.

    Raises:
        ReadError: If the file is missing, unreadable, or a directory.
    """
    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except OSError as exc:
        detail = exc.strerror or str(exc)
        raise ReadError(f"open {filepath}: {detail}") from exc

    logger.debug("Read %d bytes from %s", len(data), filepath)
    return data
