"""
Elapsed time tracking for message headers.

Uses the monotonic clock so measurements are not affected by system
clock adjustments.
"""

import time


def start() -> float:
    """Get the current monotonic time, usable as a timer start."""
    return time.monotonic()


def since_ms(start_time: float) -> float:
    """Get milliseconds elapsed since a monotonic start time."""
    return (time.monotonic() - start_time) * 1000.0


class ElapsedTimer:
    """
    Stopwatch measuring milliseconds since a start reference.

    If no start was set, the first measurement starts the clock, so that
    measurement reads approximately zero.
    """

    def __init__(self, start_time: float | None = None) -> None:
        self._start = start_time

    @property
    def started(self) -> bool:
        return self._start is not None

    def set_start(self, start_time: float) -> None:
        """Set the start reference, a time.monotonic() reading."""
        self._start = start_time

    def elapsed_ms(self) -> float:
        if self._start is None:
            self._start = start()
        return since_ms(self._start)
