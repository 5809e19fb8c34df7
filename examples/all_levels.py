#!/usr/bin/env python3
"""
All Levels Example

Logs one message at every level, first with full formatting on stderr,
then plain and file-only through the default logger.

Running the Example:
    python examples/all_levels.py

Expected Output:
    Six colored lines on stderr with index, symbol and elapsed time, and
    a <hex>.log file in the .logs/ directory holding six plain lines.
"""

import pathlib

import forestry
from forestry import FormatOptions, create_logger
from forestry.sinks import gen_log_file_name

# Log directory for examples (hidden to keep project root clean)
LOG_DIR = ".logs"


def colored_console() -> None:
    with create_logger().with_timer().with_buffer_size(64).build() as log:
        log.info("INFO")
        log.warning("WARNING")
        log.error("ERROR")
        log.success("SUCCESS")
        log.critical("CRITICAL ERROR")
        log.debug("DEBUG")


def plain_file_only() -> None:
    pathlib.Path(LOG_DIR).mkdir(exist_ok=True)
    forestry.set_log_file(open(gen_log_file_name(LOG_DIR), "w", encoding="utf-8"))
    forestry.set_log_opt(FormatOptions.ONLY_FILE)
    forestry.set_log_opt(FormatOptions.PLAIN)
    forestry.log_info("INFO")
    forestry.log_warning("WARNING")
    forestry.log_error("ERROR")
    forestry.log_success("SUCCESS")
    forestry.log_critical("CRITICAL ERROR")
    forestry.log_debug("DEBUG")
    forestry.log_deinit()


if __name__ == "__main__":
    colored_console()
    plain_file_only()
