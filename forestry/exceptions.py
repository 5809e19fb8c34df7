"""
Custom exceptions for forestry.

These are raised while building a configuration. Log calls themselves
never raise for output problems.
"""

from typing import Any


class ForestryError(Exception):
    """Base exception for forestry errors."""

    pass


class LogConfigurationError(ForestryError):
    """Raised when there's an error in logger configuration."""

    pass


class InvalidFormatOptionError(LogConfigurationError):
    """Raised when an unknown format option name is specified."""

    def __init__(self, option: Any) -> None:
        self.option = option
        super().__init__(f"Invalid format option: {option}")
