"""
Header and message formatters.

Both formatters write fragment by fragment into a FormatBuffer so that
nothing larger than a single fragment is ever staged at once.
"""

from .buffer import FormatBuffer
from .colors import ColorManager
from .constants import LogConstants
from .levels import LogLevel
from .options import FormatFlags
from .timer import ElapsedTimer


def _push_style(buf: FormatBuffer, level: LogLevel, flags: FormatFlags) -> None:
    for sequence in ColorManager.style_sequences(level, flags):
        buf.append(sequence)


def _push_clear(buf: FormatBuffer, flags: FormatFlags) -> None:
    clear = ColorManager.clear_sequence(flags)
    if clear:
        buf.append(clear)


class HeaderFormatter:
    """
    Writes the message prefix: [index:symbol](elapsed) followed by a space.

    The index and symbol are each styled with the level color. The ':'
    separator only appears when both are shown. Brackets are always
    written, so suppressing both yields "[] ".
    """

    def write(
        self,
        buf: FormatBuffer,
        level: LogLevel,
        index: int,
        flags: FormatFlags,
        timer: ElapsedTimer,
    ) -> None:
        buf.append_char("[")

        if not flags.no_index:
            _push_style(buf, level, flags)
            buf.append_u16(LogConstants.INDEX_FORMAT, index)
            _push_clear(buf, flags)
            if not flags.no_symbol:
                buf.append_char(":")

        if not flags.no_symbol:
            _push_style(buf, level, flags)
            buf.append_char(level.symbol)
            _push_clear(buf, flags)

        buf.append_char("]")

        if flags.timer:
            buf.append_char("(")
            elapsed = timer.elapsed_ms()
            _push_style(buf, level, flags)
            buf.append_float(LogConstants.ELAPSED_FORMAT, elapsed)
            _push_clear(buf, flags)
            buf.append_char(")")

        buf.append_char(" ")


class MessageFormatter:
    """Writes the styled message body and the trailing newline."""

    def write(
        self, buf: FormatBuffer, level: LogLevel, msg: str, flags: FormatFlags
    ) -> None:
        _push_style(buf, level, flags)
        buf.append(msg)
        _push_clear(buf, flags)
        buf.append_char("\n")
