"""
Constants and configuration values for the logging system.

This module contains the constant values used throughout forestry,
including buffer sizing, format templates and diagnostic messages.
"""


class LogConstants:
    """Constants for the logging system."""

    # Staging buffer capacity in bytes
    DEFAULT_BUFFER_SIZE: int = 16

    # Smallest buffer that can always hold one UTF-8 encoded character
    MIN_BUFFER_SIZE: int = 4

    # Encoding used for buffer accounting and log files
    ENCODING: str = "utf-8"

    # Unencodable characters such as lone surrogates are written as "?"
    ENCODING_ERRORS: str = "replace"

    # Sequence index is a 16-bit unsigned counter
    INDEX_MASK: int = 0xFFFF

    # Format templates for numeric fragments
    INDEX_FORMAT: str = "%04x"
    ELAPSED_FORMAT: str = "%.3fms"

    # Generated log file names: <hex microseconds>.log
    LOG_FILE_SUFFIX: str = ".log"

    # Written straight to stderr when a single fragment cannot fit the buffer
    BUFFER_OVERFLOW_ERROR: str = (
        "\n\x1b[0mBuffer overflowed twice; make buffer longer or log message shorter.\n"
    )

    # Logged at warning level when the sequence index wraps to zero
    INDEX_OVERFLOW_WARNING: str = "Log index overflowed; log index may be inaccurate."

    # ANSI escape sequences
    RESET: str = "\x1b[0m"
    BOLD: str = "\x1b[1m"
