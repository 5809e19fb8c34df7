"""
Fixed-capacity staging buffer for formatted output.

Fragments are appended whole or not at all. When a fragment does not fit
in the remaining space, the buffer is flushed and the append is retried
once; a fragment larger than the whole buffer is dropped and reported.
"""

from collections.abc import Callable

from .constants import LogConstants


class FormatBuffer:
    """
    Fixed-capacity byte buffer with a write cursor.

    Capacity is accounted in UTF-8 encoded bytes; characters that cannot
    be encoded are replaced rather than raised. Flushed contents are
    handed to the flush callback as text; the overflow callback receives
    the diagnostic for dropped fragments.
    """

    def __init__(
        self,
        capacity: int,
        flush: Callable[[str], None],
        overflow: Callable[[str], None],
    ) -> None:
        """
        Initialize the buffer.

        Args:
            capacity: Buffer size in bytes
            flush: Receives buffered text whenever the buffer is flushed
            overflow: Receives the diagnostic when a fragment is dropped
        """
        if capacity < LogConstants.MIN_BUFFER_SIZE:
            raise ValueError(f"Buffer capacity too small: {capacity}")
        self._buf = bytearray(capacity)
        self._cursor = 0
        self._on_flush = flush
        self._on_overflow = overflow

    @property
    def capacity(self) -> int:
        return len(self._buf)

    @property
    def cursor(self) -> int:
        """Offset of the next free byte."""
        return self._cursor

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._cursor

    def contents(self) -> str:
        """Get buffered text not yet flushed."""
        return self._buf[: self._cursor].decode(LogConstants.ENCODING)

    def flush(self) -> None:
        """Hand buffered text to the flush callback and reset the cursor."""
        data = self.contents()
        try:
            if data:
                self._on_flush(data)
        finally:
            self._cursor = 0

    def _put(self, data: bytes) -> None:
        end = self._cursor + len(data)
        self._buf[self._cursor : end] = data
        self._cursor = end

    def append(self, text: str) -> bool:
        """
        Append a text fragment.

        Args:
            text: Fragment to append

        Returns:
            True if the fragment was buffered, False if it was dropped
        """
        data = text.encode(LogConstants.ENCODING, LogConstants.ENCODING_ERRORS)
        if len(data) > self.remaining:
            self.flush()
            if len(data) > self.remaining:
                self._on_overflow(LogConstants.BUFFER_OVERFLOW_ERROR)
                return False
        self._put(data)
        return True

    def append_float(self, fmt: str, value: float) -> bool:
        """Append a float formatted with a %-style template."""
        return self.append(fmt % value)

    def append_u16(self, fmt: str, value: int) -> bool:
        """Append a 16-bit unsigned value formatted with a %-style template."""
        return self.append(fmt % (value & LogConstants.INDEX_MASK))

    def append_char(self, char: str) -> None:
        """
        Append a single character, flushing as often as needed to fit it.

        A character always fits an empty buffer, so this never drops.
        """
        if len(char) != 1:
            raise ValueError(f"Expected a single character: {char!r}")
        data = char.encode(LogConstants.ENCODING, LogConstants.ENCODING_ERRORS)
        while len(data) > self.remaining:
            self.flush()
        self._put(data)
