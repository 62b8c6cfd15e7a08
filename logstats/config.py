"""Configuration module: frozen dataclass loaded from environment variables."""

import logging
import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    log_level: str = "WARNING"

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config() -> Config:
    """Build Config from environment variables with sensible defaults.

    Only diagnostics verbosity is configurable; input is always UTF-8.
    """
    level = os.environ.get("LOG_STATS_LOG_LEVEL", Config.log_level).upper()
    if level not in LOG_LEVELS:
        level = Config.log_level
    return Config(log_level=level)
