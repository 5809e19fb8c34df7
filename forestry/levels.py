"""
Log levels for forestry.

Each level carries the one-character symbol shown in message headers and
whether its styling includes bold.
"""

import enum


class LogLevel(enum.Enum):
    """Fixed set of message priority levels."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"
    CRITICAL = "critical"
    DEBUG = "debug"

    @property
    def symbol(self) -> str:
        """Single character identifying the level in the header."""
        return _SYMBOLS[self]

    @property
    def bold(self) -> bool:
        """Whether messages at this level are emphasized."""
        return self in _BOLD_LEVELS


_SYMBOLS: dict[LogLevel, str] = {
    LogLevel.INFO: "*",
    LogLevel.WARNING: "~",
    LogLevel.ERROR: "!",
    LogLevel.SUCCESS: "+",
    LogLevel.CRITICAL: "%",
    LogLevel.DEBUG: "?",
}

_BOLD_LEVELS = frozenset({LogLevel.ERROR, LogLevel.SUCCESS, LogLevel.CRITICAL})
