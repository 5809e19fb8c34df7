"""
Color management for forestry.

This module provides the ANSI color code for each log level and selects
the style and clear sequences allowed by the active flags.
"""

from .constants import LogConstants
from .levels import LogLevel
from .options import FormatFlags


class ColorManager:
    """Centralized ANSI color code management."""

    # Basic ANSI color escape sequences
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    WHITE_ON_RED = "\x1b[37;41m"

    BOLD = LogConstants.BOLD
    RESET = LogConstants.RESET

    COLORS: dict[LogLevel, str] = {
        LogLevel.INFO: BLUE,
        LogLevel.WARNING: YELLOW,
        LogLevel.ERROR: RED,
        LogLevel.SUCCESS: GREEN,
        LogLevel.CRITICAL: WHITE_ON_RED,
        LogLevel.DEBUG: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: LogLevel) -> str:
        """
        Get color escape sequence for a log level.

        Args:
            level: Log level

        Returns:
            Color escape sequence
        """
        return ColorManager.COLORS[level]

    @staticmethod
    def style_sequences(level: LogLevel, flags: FormatFlags) -> list[str]:
        """
        Get the escape sequences that open a styled segment.

        Color comes first, then bold for levels that use it. Either part
        is left out when the flags suppress it.

        Args:
            level: Log level
            flags: Active format flags

        Returns:
            Escape sequences in output order, possibly empty
        """
        sequences = []
        if not flags.no_color:
            sequences.append(ColorManager.get_color_for_level(level))
        if not flags.no_bold and level.bold:
            sequences.append(ColorManager.BOLD)
        return sequences

    @staticmethod
    def clear_sequence(flags: FormatFlags) -> str:
        """
        Get the sequence that closes a styled segment.

        Args:
            flags: Active format flags

        Returns:
            Reset sequence, or an empty string in plain mode
        """
        if flags.plain:
            return ""
        return ColorManager.RESET
