"""
Output sinks for flushed buffer contents.

The dispatcher writes to the stderr stream and/or a log file according
to the active flags. When file output is enabled and no file was given,
a file named after the current monotonic time in hex microseconds is
created on first use. Sink failures never reach the caller.
"""

import logging
import sys
import time
from pathlib import Path
from typing import TextIO

from .constants import LogConstants
from .options import FormatFlags

lg = logging.getLogger(__name__)


def gen_log_file_name(directory: str | Path | None = None) -> Path:
    """
    Generate a log file path from the monotonic clock.

    Args:
        directory: Directory for the file (default: current directory)

    Returns:
        Path of the form <hex microseconds>.log
    """
    micros = time.monotonic_ns() // 1000
    name = f"{micros:x}{LogConstants.LOG_FILE_SUFFIX}"
    if directory is None:
        return Path(name)
    return Path(directory) / name


class SinkDispatcher:
    """Routes flushed text to stderr and the log file."""

    def __init__(
        self,
        stream: TextIO | None = None,
        file_path: str | Path | None = None,
        log_dir: str | Path | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            stream: Console stream (default: sys.stderr, looked up at write time)
            file_path: Explicit log file path, opened on first file write
            log_dir: Directory for generated log file names
        """
        self._stream = stream
        self._file: TextIO | None = None
        self._file_path = file_path
        self._log_dir = log_dir
        self._file_unavailable = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @property
    def file(self) -> TextIO | None:
        return self._file

    def set_file(self, handle: TextIO) -> None:
        """Use an already open handle for file output.

        A previously opened file is left open.
        """
        self._file = handle
        self._file_unavailable = False

    def _open_file(self) -> TextIO | None:
        if self._file_path is not None:
            path = Path(self._file_path)
        else:
            path = gen_log_file_name(self._log_dir)
        try:
            handle = open(path, "w", encoding=LogConstants.ENCODING)
        except OSError as e:
            lg.debug("log file unavailable", extra={"path": str(path), "error": e})
            self._file_unavailable = True
            return None
        lg.debug("created log file", extra={"path": str(path)})
        return handle

    @staticmethod
    def _write(target: TextIO, data: str) -> None:
        try:
            target.write(data)
        except (OSError, ValueError) as e:
            lg.debug("sink write failed", extra={"error": e})

    def dispatch(self, data: str, flags: FormatFlags) -> None:
        """
        Write flushed text to the sinks selected by the flags.

        Args:
            data: Flushed buffer contents
            flags: Active format flags
        """
        if flags.to_stderr:
            self._write(self.stream, data)
        if flags.log_file:
            if self._file is None and not self._file_unavailable:
                self._file = self._open_file()
            if self._file is not None:
                self._write(self._file, data)

    def report(self, message: str) -> None:
        """Write a diagnostic directly to the stderr stream."""
        self._write(self.stream, message)

    def close(self) -> None:
        """Close the log file, if any, and flush the stream."""
        if self._file is not None:
            try:
                self._file.close()
            except OSError as e:
                lg.debug("closing log file failed", extra={"error": e})
            self._file = None
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            lg.debug("flushing stream failed", extra={"error": e})
