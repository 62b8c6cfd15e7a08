"""log-stats: summarize a JSON array of log records."""

__version__ = "0.1.0"
