"""Log record model: Timestamp value type, frozen LogRecord, LogCollection."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Iterable, Iterator

from logstats.errors import FormatError

TIMESTAMP_LAYOUT = "%Y-%m-%d %H:%M:%S.%f"

# strptime alone would accept single-digit fields and short fractions;
# the hour alone may be one or two digits
TIMESTAMP_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{1,2}:[0-9]{2}:[0-9]{2}\.[0-9]{6}"
)

ERROR_LEVEL = "ERROR"


@dataclass(frozen=True, order=True)
class Timestamp:
    """A naive point in time encoded as ``YYYY-MM-DD HH:MM:SS.ffffff``."""

    value: datetime

    @classmethod
    def parse(cls, raw) -> Timestamp:
        """Parse ``raw`` against TIMESTAMP_LAYOUT after stripping quotes.

        Raises:
            FormatError: If ``raw`` is not a string in the fixed layout.
        """
        if not isinstance(raw, str):
            raise FormatError(f"timestamp must be a string, got {raw!r}")

        stripped = raw.strip('"')
        if not TIMESTAMP_PATTERN.fullmatch(stripped):
            raise FormatError(
                f"timestamp {raw!r} does not match layout "
                f"'YYYY-MM-DD HH:MM:SS.ffffff'"
            )
        try:
            value = datetime.strptime(stripped, TIMESTAMP_LAYOUT)
        except ValueError as exc:
            raise FormatError(f"timestamp {raw!r} is out of range: {exc}") from exc
        return cls(value)

    @classmethod
    def zero(cls) -> Timestamp:
        return cls(datetime.min)

    def format(self) -> str:
        # strftime does not zero-pad years below 1000 on every platform
        return self.value.isoformat(sep=" ", timespec="microseconds")

    def __str__(self) -> str:
        return self.format()

    def __sub__(self, other: Timestamp) -> timedelta:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.value - other.value


@dataclass(frozen=True)
class LogRecord:
    service: str = ""
    level: str = ""
    timestamp: Timestamp = Timestamp.zero()
    operation: str = ""
    message: str = ""
    transaction_id: str = ""

    def is_error(self) -> bool:
        """True if the record's level is exactly ERROR_LEVEL."""
        return self.level == ERROR_LEVEL


class LogCollection:
    """Immutable, ordered sequence of LogRecord in input order."""

    def __init__(self, records: Iterable[LogRecord] = ()):
        self._records = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LogRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> LogRecord:
        return self._records[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, LogCollection):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"LogCollection({len(self._records)} records)"

    def sorted_by_timestamp(self) -> LogCollection:
        """Return a new collection sorted ascending by timestamp (stable)."""
        return LogCollection(sorted(self._records, key=lambda r: r.timestamp))

    def group_by(self, key: Callable[[LogRecord], str]) -> dict[str, LogCollection]:
        """Partition records by ``key``.

        Groups appear in the order their first record appears, and records
        within a group keep their original relative order.
        """
        groups: dict[str, list[LogRecord]] = {}
        for record in self._records:
            groups.setdefault(key(record), []).append(record)
        return {k: LogCollection(v) for k, v in groups.items()}
