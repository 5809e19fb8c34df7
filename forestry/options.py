"""
Format options and the flag set they build.

Options are a closed enumeration. Applying an option only ever turns
flags on; RESET is the single way back to the defaults.
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import InvalidFormatOptionError


class FormatOptions(enum.Enum):
    """Formatting options accepted by Logger.set_option()."""

    NO_INDEX = "no_index"
    NO_SYMBOL = "no_symbol"
    NO_COLOR = "no_color"
    NO_BOLD = "no_bold"
    PLAIN = "plain"
    BASIC = "basic"
    TIMER = "timer"
    LOG_FILE = "log_file"
    ONLY_FILE = "only_file"
    RESET = "reset"

    @classmethod
    def from_name(cls, name: str) -> FormatOptions:
        """
        Resolve an option from its name.

        Names are case insensitive and accept '-' in place of '_'.
        The spellings suppress-index, suppress-symbol, suppress-color,
        suppress-bold and file-only are accepted as aliases.

        Args:
            name: Option name, e.g. "plain" or "suppress-index"

        Returns:
            Matching FormatOptions member

        Raises:
            InvalidFormatOptionError: If the name is not recognized
        """
        if not isinstance(name, str):
            raise InvalidFormatOptionError(name)

        key = name.strip().lower().replace("-", "_")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidFormatOptionError(name) from None


_ALIASES: dict[str, str] = {
    "suppress_index": "no_index",
    "suppress_symbol": "no_symbol",
    "suppress_color": "no_color",
    "suppress_bold": "no_bold",
    "file_only": "only_file",
}

# Flags switched on by each option
_OPTION_FLAGS: dict[FormatOptions, tuple[str, ...]] = {
    FormatOptions.NO_INDEX: ("no_index",),
    FormatOptions.NO_SYMBOL: ("no_symbol",),
    FormatOptions.NO_COLOR: ("no_color",),
    FormatOptions.NO_BOLD: ("no_bold",),
    FormatOptions.PLAIN: ("no_color", "no_bold"),
    FormatOptions.BASIC: ("no_index", "no_symbol", "no_color", "no_bold"),
    FormatOptions.TIMER: ("timer",),
    FormatOptions.LOG_FILE: ("log_file",),
    FormatOptions.ONLY_FILE: ("log_file", "file_only"),
    FormatOptions.RESET: (),
}


@dataclass(frozen=True)
class FormatFlags:
    """
    Immutable set of formatting flags.

    All flags default to False, which means full formatting: index and
    symbol shown, colored and bold output, stderr as the only sink.
    """

    no_index: bool = False
    no_symbol: bool = False
    no_color: bool = False
    no_bold: bool = False
    timer: bool = False
    log_file: bool = False
    file_only: bool = False

    @classmethod
    def from_options(cls, options: Iterable[FormatOptions | str]) -> FormatFlags:
        """
        Build flags by applying options in order.

        Args:
            options: FormatOptions members or option names

        Returns:
            FormatFlags instance
        """
        flags = cls()
        for option in options:
            flags = flags.apply(option)
        return flags

    def apply(self, option: FormatOptions | str) -> FormatFlags:
        """
        Return new flags with the given option applied.

        Args:
            option: FormatOptions member or option name

        Returns:
            FormatFlags with the option's flags set, or defaults for RESET
        """
        if isinstance(option, str):
            option = FormatOptions.from_name(option)
        elif not isinstance(option, FormatOptions):
            raise InvalidFormatOptionError(option)
        if option is FormatOptions.RESET:
            return FormatFlags()
        return dataclasses.replace(self, **dict.fromkeys(_OPTION_FLAGS[option], True))

    @property
    def plain(self) -> bool:
        """True when neither color nor bold sequences are emitted."""
        return self.no_color and self.no_bold

    @property
    def to_stderr(self) -> bool:
        """True when output goes to the stderr stream."""
        return not self.file_only
