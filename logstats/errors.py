"""Error taxonomy: every failure is fatal and maps to a non-zero exit."""


class LogStatsError(Exception):
    """Base class for errors that abort a log-stats run."""

    exit_code = 1


class ArgumentError(LogStatsError):
    """Raised when no input file path is supplied."""

    exit_code = 2


class ReadError(LogStatsError):
    """Raised when the input file cannot be opened or read."""


class DecodeError(LogStatsError):
    """Raised when the input is not a well-formed JSON array of objects."""


class FormatError(LogStatsError):
    """Raised when a timestamp does not match the fixed layout."""
