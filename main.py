"""log-stats: total entries, longest transaction, and most-failing operation."""

import sys

from logstats.cli import entry_point

if __name__ == "__main__":
    sys.exit(entry_point())
