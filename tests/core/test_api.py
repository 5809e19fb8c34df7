"""
Tests for the module-level logging functions.

The functions share one default logger writing to sys.stderr, which is
captured with capsys.
"""

import pytest

import forestry
from forestry import FormatOptions
from forestry.constants import LogConstants
from forestry.timer import start


@pytest.mark.unit
class TestDefaultLoggerApi:
    """Test the functional API over the default logger."""

    def test_get_logger_is_shared(self):
        """Test the default logger is created once."""
        assert forestry.get_logger() is forestry.get_logger()

    def test_all_levels(self, capsys):
        """Test each level function writes one line."""
        forestry.set_log_opt(FormatOptions.PLAIN)
        forestry.log_info("I")
        forestry.log_warning("W")
        forestry.log_error("E")
        forestry.log_success("S")
        forestry.log_critical("C")
        forestry.log_debug("D")
        forestry.log_deinit()
        assert capsys.readouterr().err == (
            "[0000:*] I\n[0001:~] W\n[0002:!] E\n[0003:+] S\n[0004:%] C\n[0005:?] D\n"
        )

    def test_set_log_opt_by_name(self, capsys):
        """Test options can be passed by name."""
        forestry.set_log_opt("basic")
        forestry.log_info("x")
        forestry.log_deinit()
        assert capsys.readouterr().err == "[] x\n"

    def test_set_log_timer(self):
        """Test set_log_timer enables the timer."""
        forestry.set_log_opt(FormatOptions.BASIC)
        forestry.set_log_timer(start())
        assert forestry.get_logger().flags.timer

    def test_set_log_file(self, capsys, tmp_path):
        """Test set_log_file with file-only output."""
        path = tmp_path / "default.log"
        forestry.set_log_file(open(path, "w", encoding="utf-8"))
        forestry.set_log_opt(FormatOptions.ONLY_FILE)
        forestry.set_log_opt(FormatOptions.BASIC)
        forestry.log_info("INFO")
        forestry.log_deinit()
        assert capsys.readouterr().err == ""
        assert path.read_text(encoding="utf-8") == "[] INFO\n"

    def test_deinit_starts_fresh_logger(self, capsys):
        """Test logging after log_deinit uses a new default logger."""
        forestry.set_log_opt(FormatOptions.PLAIN)
        forestry.log_info("a")
        first = forestry.get_logger()
        forestry.log_deinit()
        assert first.closed
        assert forestry.get_logger() is not first
        assert forestry.get_logger().index == 0

    def test_deinit_without_logger(self):
        """Test log_deinit with no default logger does nothing."""
        forestry.log_deinit()
        forestry.log_deinit()

    def test_overflow_warning_text(self):
        """Test the wraparound warning text."""
        assert (
            LogConstants.INDEX_OVERFLOW_WARNING
            == "Log index overflowed; log index may be inaccurate."
        )
