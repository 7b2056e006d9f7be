"""Trading journal: trade log, dashboard statistics, pattern analysis and AI coaching."""

__version__ = "1.0.0"
