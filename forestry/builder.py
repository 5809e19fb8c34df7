"""
Fluent builder for forestry loggers.

This module provides a chainable API for assembling a LoggerConfig and
the runtime settings that go with it, then creating the Logger.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TextIO

from .config import LoggerConfig
from .constants import LogConstants
from .logger import Logger
from .options import FormatOptions


class LoggerBuilder:
    """
    Fluent builder for configuring loggers.

    Example:
        log = (create_logger()
            .plain()
            .with_timer()
            .with_file("app.log")
            .build())
    """

    def __init__(self) -> None:
        self._options: list[FormatOptions | str] = []
        self._buffer_size = LogConstants.DEFAULT_BUFFER_SIZE
        self._log_file: str | Path | None = None
        self._log_dir: str | Path | None = None
        self._file_handle: TextIO | None = None
        self._stream: TextIO | None = None
        self._timer_start: float | None = None

    def with_option(self, option: FormatOptions | str) -> LoggerBuilder:
        """
        Add a format option.

        Args:
            option: FormatOptions member or option name

        Returns:
            Self for method chaining
        """
        self._options.append(option)
        return self

    def no_index(self) -> LoggerBuilder:
        return self.with_option(FormatOptions.NO_INDEX)

    def no_symbol(self) -> LoggerBuilder:
        return self.with_option(FormatOptions.NO_SYMBOL)

    def no_color(self) -> LoggerBuilder:
        return self.with_option(FormatOptions.NO_COLOR)

    def no_bold(self) -> LoggerBuilder:
        return self.with_option(FormatOptions.NO_BOLD)

    def plain(self) -> LoggerBuilder:
        return self.with_option(FormatOptions.PLAIN)

    def basic(self) -> LoggerBuilder:
        return self.with_option(FormatOptions.BASIC)

    def file_only(self) -> LoggerBuilder:
        return self.with_option(FormatOptions.ONLY_FILE)

    def with_timer(self, start: float | None = None) -> LoggerBuilder:
        """
        Show elapsed time in headers.

        Args:
            start: A time.monotonic() reading; the clock starts at the
                first message when omitted

        Returns:
            Self for method chaining
        """
        self._timer_start = start
        return self.with_option(FormatOptions.TIMER)

    def with_file(self, path: str | Path | None = None) -> LoggerBuilder:
        """
        Also write output to a log file.

        Args:
            path: Log file path; a <hex microseconds>.log name is
                generated when omitted

        Returns:
            Self for method chaining
        """
        self._log_file = path
        return self.with_option(FormatOptions.LOG_FILE)

    def with_file_handle(self, handle: TextIO) -> LoggerBuilder:
        """
        Write file output to an already open handle.

        Returns:
            Self for method chaining
        """
        self._file_handle = handle
        return self

    def with_buffer_size(self, size: int) -> LoggerBuilder:
        self._buffer_size = size
        return self

    def with_log_dir(self, path: str | Path) -> LoggerBuilder:
        """Set the directory for generated log file names."""
        self._log_dir = path
        return self

    def with_stream(self, stream: TextIO) -> LoggerBuilder:
        """Set the console stream (default: sys.stderr)."""
        self._stream = stream
        return self

    def with_config(self, config: dict[str, Any]) -> LoggerBuilder:
        """
        Set multiple configuration parameters at once.

        Args:
            config: Configuration dictionary with keys:
                - options: Option name or list of option names
                - buffer_size: Staging buffer capacity in bytes
                - file: Log file path
                - dir: Directory for generated log file names

        Returns:
            Self for method chaining
        """
        if "options" in config:
            options = config["options"]
            self._options.extend([options] if isinstance(options, str) else options)
        if "buffer_size" in config:
            self._buffer_size = config["buffer_size"]
        if "file" in config:
            self.with_file(config["file"])
        if "dir" in config:
            self._log_dir = config["dir"]
        return self

    def build(self) -> Logger:
        """
        Create the configured logger.

        Returns:
            Logger instance

        Raises:
            LogConfigurationError: If the configuration is invalid
        """
        config = LoggerConfig.from_params(
            options=self._options,
            buffer_size=self._buffer_size,
            log_file=self._log_file,
            log_dir=self._log_dir,
        )
        logger = Logger(config, stream=self._stream)
        if self._timer_start is not None:
            logger.set_timer(self._timer_start)
        if self._file_handle is not None:
            logger.set_file(self._file_handle)
        return logger


def create_logger() -> LoggerBuilder:
    """
    Create a logging builder.

    Returns:
        LoggerBuilder instance
    """
    return LoggerBuilder()
