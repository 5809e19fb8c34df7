"""
Configuration for forestry loggers.

This module provides an immutable configuration value for Logger
instances, built from parameters, a plain dictionary or a YAML file.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .constants import LogConstants
from .exceptions import LogConfigurationError
from .options import FormatFlags, FormatOptions


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable configuration for a Logger.

    Holds the initial format flags, the staging buffer size and where
    file output goes. Flags can still be extended on the logger itself
    through set_option().
    """

    flags: FormatFlags = field(default_factory=FormatFlags)
    buffer_size: int = LogConstants.DEFAULT_BUFFER_SIZE
    log_file: str | None = None  # explicit log file path, opened lazily
    log_dir: str | None = None  # directory for generated log file names

    def __post_init__(self) -> None:
        size = self.buffer_size
        if isinstance(size, bool) or not isinstance(size, int):
            raise LogConfigurationError(f"Invalid buffer size: {size!r}")
        if size < LogConstants.MIN_BUFFER_SIZE:
            raise LogConfigurationError(
                f"Buffer size must be at least "
                f"{LogConstants.MIN_BUFFER_SIZE} bytes: {size}"
            )

    @classmethod
    def from_params(
        cls,
        options: Iterable[FormatOptions | str] = (),
        buffer_size: int = LogConstants.DEFAULT_BUFFER_SIZE,
        log_file: str | Path | None = None,
        log_dir: str | Path | None = None,
    ) -> LoggerConfig:
        """
        Create LoggerConfig from individual parameters.

        Args:
            options: Format options to apply, as members or names
            buffer_size: Staging buffer capacity in bytes
            log_file: Explicit log file path; enables file output
            log_dir: Directory for generated log file names

        Returns:
            LoggerConfig instance

        Raises:
            InvalidFormatOptionError: If an option name is unknown
            LogConfigurationError: If the buffer size is invalid
        """
        flags = FormatFlags.from_options(options)
        if log_file is not None:
            flags = flags.apply(FormatOptions.LOG_FILE)

        return cls(
            flags=flags,
            buffer_size=buffer_size,
            log_file=str(log_file) if log_file is not None else None,
            log_dir=str(log_dir) if log_dir is not None else None,
        )

    @staticmethod
    def _navigate_to_section(config_dict: dict, section: str) -> dict:
        """Navigate to specified section in config dict."""
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return {}
        return current if isinstance(current, dict) else {}

    @classmethod
    def from_config(cls, config_dict: dict, section: str = "logging") -> LoggerConfig:
        """
        Create LoggerConfig from a configuration dictionary.

        Recognized keys in the section are options (a list of option
        names or a single name), buffer_size, file and dir.

        Args:
            config_dict: Configuration dictionary
            section: Dotted path of the section to use (default: "logging")

        Returns:
            LoggerConfig instance

        Example:
            config = LoggerConfig.from_config(
                {"logging": {"options": ["plain", "timer"], "buffer_size": 64}}
            )
        """
        current = cls._navigate_to_section(config_dict, section)

        options = current.get("options", [])
        if isinstance(options, str):
            options = [options]
        elif not isinstance(options, list):
            raise LogConfigurationError(f"Invalid options value: {options!r}")

        return cls.from_params(
            options=options,
            buffer_size=current.get("buffer_size", LogConstants.DEFAULT_BUFFER_SIZE),
            log_file=current.get("file"),
            log_dir=current.get("dir"),
        )

    @classmethod
    def from_yaml(cls, path: str | Path, section: str = "logging") -> LoggerConfig:
        """
        Create LoggerConfig from a YAML file.

        Args:
            path: Path to the YAML file
            section: Dotted path of the section to use (default: "logging")

        Returns:
            LoggerConfig instance

        Raises:
            LogConfigurationError: If the file can't be read or parsed
        """
        try:
            with open(path, encoding=LogConstants.ENCODING) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise LogConfigurationError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise LogConfigurationError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_config(data if isinstance(data, dict) else {}, section)
