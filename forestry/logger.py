"""
Logger class for forestry.

A Logger owns everything a log call touches: format flags, the sequence
index, the elapsed timer, the staging buffer and the sinks. Instances
are independent of each other; the module-level functions in forestry
share one default instance.

Loggers are not thread-safe. Callers logging from several threads must
guard each call with their own lock.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TextIO

from .buffer import FormatBuffer
from .config import LoggerConfig
from .constants import LogConstants
from .formatters import HeaderFormatter, MessageFormatter
from .levels import LogLevel
from .options import FormatFlags, FormatOptions
from .sinks import SinkDispatcher
from .timer import ElapsedTimer

lg = logging.getLogger(__name__)


class Logger:
    """
    Leveled console and file logger with a fixed-size staging buffer.

    Output reaches the sinks when the buffer fills, on flush() and on
    deinit(). deinit() must be called once when logging is done, or used
    through the context manager protocol; logging afterwards is not
    supported.

    Example:
        >>> with Logger() as log:
        ...     log.configure(FormatOptions.TIMER)
        ...     log.info("ready")
    """

    def __init__(
        self, config: LoggerConfig | None = None, stream: TextIO | None = None
    ) -> None:
        """
        Initialize the logger.

        Args:
            config: Logger configuration (defaults to LoggerConfig())
            stream: Console stream (defaults to sys.stderr)
        """
        if config is None:
            config = LoggerConfig()

        self._config = config
        self._flags = config.flags
        self._index = 0
        self._timer = ElapsedTimer()
        self._buffer: FormatBuffer | None = None  # allocated on first log call
        self._sinks = SinkDispatcher(
            stream=stream, file_path=config.log_file, log_dir=config.log_dir
        )
        self._header = HeaderFormatter()
        self._message = MessageFormatter()
        self._closed = False

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def flags(self) -> FormatFlags:
        """Get currently active format flags."""
        return self._flags

    @property
    def index(self) -> int:
        """Get the sequence index the next message will carry."""
        return self._index

    @property
    def closed(self) -> bool:
        return self._closed

    def set_option(self, option: FormatOptions | str) -> None:
        """
        Apply a format option.

        Options only add flags; FormatOptions.RESET restores the defaults.

        Args:
            option: FormatOptions member or option name
        """
        self._flags = self._flags.apply(option)

    def configure(self, *options: FormatOptions | str) -> Logger:
        """
        Apply several format options in order.

        Returns:
            Self for method chaining
        """
        for option in options:
            self.set_option(option)
        return self

    def set_timer(self, start: float) -> None:
        """
        Set the timer start and enable elapsed time in headers.

        Args:
            start: A time.monotonic() reading
        """
        self._timer.set_start(start)
        self.set_option(FormatOptions.TIMER)

    def set_file(self, handle: TextIO) -> None:
        """
        Log to an open text handle and enable file output.

        The logger takes ownership of the handle and closes it in deinit().
        A handle set earlier, or a file created lazily, is not closed.

        Args:
            handle: Writable text file handle
        """
        self._sinks.set_file(handle)
        self.set_option(FormatOptions.LOG_FILE)

    def log(self, level: LogLevel, msg: str) -> None:
        """
        Log a message at the given level.

        Args:
            level: Message level
            msg: Message text
        """
        if self._buffer is None:
            self._buffer = FormatBuffer(
                self._config.buffer_size, self._dispatch, self._sinks.report
            )

        self._header.write(self._buffer, level, self._index, self._flags, self._timer)
        self._message.write(self._buffer, level, msg, self._flags)

        self._index = (self._index + 1) & LogConstants.INDEX_MASK
        if self._index == 0:
            self.warning(LogConstants.INDEX_OVERFLOW_WARNING)

    def info(self, msg: str) -> None:
        self.log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self.log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        self.log(LogLevel.ERROR, msg)

    def success(self, msg: str) -> None:
        self.log(LogLevel.SUCCESS, msg)

    def critical(self, msg: str) -> None:
        self.log(LogLevel.CRITICAL, msg)

    def debug(self, msg: str) -> None:
        self.log(LogLevel.DEBUG, msg)

    def _dispatch(self, data: str) -> None:
        self._sinks.dispatch(data, self._flags)

    def flush(self) -> None:
        """Write buffered output to the sinks now."""
        if self._buffer is not None:
            self._buffer.flush()

    def deinit(self) -> None:
        """
        Flush remaining output, close the log file and release the buffer.

        Calling it again has no effect.
        """
        if self._closed:
            return
        self._closed = True

        self.flush()
        self._sinks.close()
        self._buffer = None
        lg.debug("logger deinitialized", extra={"index": self._index})

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.deinit()
