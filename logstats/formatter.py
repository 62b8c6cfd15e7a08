"""Plain-text report formatting and compact duration rendering."""

from datetime import timedelta

from logstats.aggregator import OperationErrors, TransactionSpan

MICROSECOND = 1
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE


def _fraction(value: int, digits: int) -> str:
    """Render ``value`` as a decimal fraction of ``digits`` places, zeros trimmed."""
    trimmed = f"{value:0{digits}d}".rstrip("0")
    return f".{trimmed}" if trimmed else ""


def format_duration(duration: timedelta) -> str:
    """Render a duration compactly, e.g. 0s, 750µs, 1.5ms, 10s, 1m0s, 2h3m4.5s."""
    total = (duration.days * 86400 + duration.seconds) * SECOND + duration.microseconds
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    total = abs(total)

    if total < MILLISECOND:
        return f"{sign}{total}µs"
    if total < SECOND:
        return f"{sign}{total // MILLISECOND}{_fraction(total % MILLISECOND, 3)}ms"

    hours, rest = divmod(total, HOUR)
    minutes, rest = divmod(rest, MINUTE)
    seconds, micros = divmod(rest, SECOND)
    text = f"{seconds}{_fraction(micros, 6)}s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def format_transaction(span: TransactionSpan) -> str:
    return f"{span.transaction_id} ({format_duration(span.duration)})"


def format_operation(errors: OperationErrors) -> str:
    return f"{errors.operation} ({errors.count} Errors)"


def format_report(total: int, longest: TransactionSpan, most_errors: OperationErrors) -> str:
    """The three-line summary printed on success."""
    lines = [
        f"Total Log Entries: {total}",
        f"Longest Transaction: {format_transaction(longest)}",
        f"Operation with Most Errors: {format_operation(most_errors)}",
    ]
    return "\n".join(lines)
