"""
Lightweight leveled logging to the console and log files.

forestry formats messages at six levels (info, warning, error, success,
critical, debug) with an optional ANSI color scheme, a 16-bit sequence
index, a level symbol and an elapsed-time stamp:

    [0000:*](0.012ms) message

Output is staged in a small fixed-size buffer and written to stderr
and/or a log file when the buffer fills, so most messages cost only a
few writes.

Two styles of use are supported:
- Logger instances (or LoggerBuilder) with an explicit lifecycle
- Module-level functions operating on a shared default logger

Example:
    import forestry

    forestry.set_log_opt(forestry.FormatOptions.TIMER)
    forestry.log_info("starting")
    forestry.log_success("done")
    forestry.log_deinit()
"""

from typing import TextIO

from .builder import LoggerBuilder, create_logger
from .colors import ColorManager
from .config import LoggerConfig
from .constants import LogConstants
from .exceptions import ForestryError, InvalidFormatOptionError, LogConfigurationError
from .levels import LogLevel
from .logger import Logger
from .options import FormatFlags, FormatOptions

_default_logger: Logger | None = None


def get_logger() -> Logger:
    """
    Get the default logger used by the module-level functions.

    Created on first use with the default configuration.
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = Logger()
    return _default_logger


def set_log_opt(option: FormatOptions | str) -> None:
    """Apply a format option to the default logger."""
    get_logger().set_option(option)


def set_log_timer(start_time: float) -> None:
    """Set the default logger's timer start (a time.monotonic() reading)."""
    get_logger().set_timer(start_time)


def set_log_file(handle: TextIO) -> None:
    """Log to an open text handle from the default logger."""
    get_logger().set_file(handle)


def log_info(msg: str) -> None:
    get_logger().info(msg)


def log_warning(msg: str) -> None:
    get_logger().warning(msg)


def log_error(msg: str) -> None:
    get_logger().error(msg)


def log_success(msg: str) -> None:
    get_logger().success(msg)


def log_critical(msg: str) -> None:
    get_logger().critical(msg)


def log_debug(msg: str) -> None:
    get_logger().debug(msg)


def log_deinit() -> None:
    """
    Shut down the default logger.

    Flushes pending output, closes the log file and drops the logger.
    Must be called once when the program is done logging; a later log
    call starts a fresh default logger.
    """
    global _default_logger
    if _default_logger is not None:
        _default_logger.deinit()
        _default_logger = None


__all__ = [
    # Core classes
    "Logger",
    "LoggerConfig",
    "LoggerBuilder",
    "FormatOptions",
    "FormatFlags",
    "LogLevel",
    "LogConstants",
    "ColorManager",
    # Exception classes
    "ForestryError",
    "LogConfigurationError",
    "InvalidFormatOptionError",
    # Builder factory function
    "create_logger",
    # Default logger API
    "get_logger",
    "set_log_opt",
    "set_log_timer",
    "set_log_file",
    "log_info",
    "log_warning",
    "log_error",
    "log_success",
    "log_critical",
    "log_debug",
    "log_deinit",
]
