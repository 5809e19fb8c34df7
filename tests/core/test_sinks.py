"""
Tests for the sink dispatcher.

Tests key functionality including:
- Routing to stderr and/or file by flags
- Lazy creation of timestamp-named log files
- Best-effort handling of open and write failures
"""

import re
from io import StringIO

import pytest

from forestry.options import FormatFlags, FormatOptions
from forestry.sinks import SinkDispatcher, gen_log_file_name

FILE_FLAGS = FormatFlags().apply(FormatOptions.LOG_FILE)
ONLY_FILE_FLAGS = FormatFlags().apply(FormatOptions.ONLY_FILE)


# =============================================================================
# Test gen_log_file_name
# =============================================================================


@pytest.mark.unit
class TestGenLogFileName:
    """Test generated log file names."""

    def test_hex_name_with_suffix(self):
        """Test the name is hex microseconds plus .log."""
        path = gen_log_file_name()
        assert re.fullmatch(r"[0-9a-f]+\.log", str(path))

    def test_directory(self, tmp_path):
        """Test the name is placed in the given directory."""
        path = gen_log_file_name(tmp_path)
        assert path.parent == tmp_path

    def test_names_increase(self):
        """Test later names carry larger timestamps."""
        first = int(gen_log_file_name().stem, 16)
        second = int(gen_log_file_name().stem, 16)
        assert second >= first


# =============================================================================
# Test SinkDispatcher
# =============================================================================


@pytest.mark.unit
class TestSinkDispatcher:
    """Test SinkDispatcher routing."""

    def test_default_writes_stream_only(self, stream, in_temp_cwd):
        """Test default flags write to the stream and create no file."""
        sinks = SinkDispatcher(stream=stream)
        sinks.dispatch("hello", FormatFlags())
        assert stream.getvalue() == "hello"
        assert sinks.file is None
        assert list(in_temp_cwd.iterdir()) == []

    def test_defaults_to_sys_stderr(self, capsys):
        """Test the stream is looked up on sys.stderr when not given."""
        sinks = SinkDispatcher()
        sinks.dispatch("to stderr", FormatFlags())
        assert capsys.readouterr().err == "to stderr"

    def test_report_ignores_file_only(self, stream):
        """Test diagnostics always go to the stream."""
        sinks = SinkDispatcher(stream=stream)
        sinks.report("diagnostic")
        assert stream.getvalue() == "diagnostic"

    def test_set_file(self, stream, tmp_path):
        """Test an explicit handle receives file output."""
        path = tmp_path / "explicit.log"
        sinks = SinkDispatcher(stream=stream)
        sinks.set_file(open(path, "w", encoding="utf-8"))
        sinks.dispatch("line\n", FILE_FLAGS)
        sinks.close()
        assert path.read_text(encoding="utf-8") == "line\n"
        assert stream.getvalue() == "line\n"
        assert sinks.file is None

    def test_close_without_file(self, stream):
        """Test closing with no file open is harmless."""
        sinks = SinkDispatcher(stream=stream)
        sinks.close()
        assert sinks.file is None


@pytest.mark.integration
class TestSinkDispatcherFiles:
    """Test lazy file creation and failure handling."""

    def test_lazy_file_in_cwd(self, stream, in_temp_cwd):
        """Test a hex-named file is created on first file write."""
        sinks = SinkDispatcher(stream=stream)
        sinks.dispatch("a", ONLY_FILE_FLAGS)
        sinks.dispatch("b", ONLY_FILE_FLAGS)
        sinks.close()

        files = list(in_temp_cwd.glob("*.log"))
        assert len(files) == 1
        assert re.fullmatch(r"[0-9a-f]+\.log", files[0].name)
        assert files[0].read_text(encoding="utf-8") == "ab"
        assert stream.getvalue() == ""

    def test_lazy_file_in_log_dir(self, stream, tmp_path):
        """Test generated names are placed in log_dir."""
        sinks = SinkDispatcher(stream=stream, log_dir=tmp_path)
        sinks.dispatch("x", FILE_FLAGS)
        sinks.close()
        assert [p.read_text(encoding="utf-8") for p in tmp_path.glob("*.log")] == ["x"]

    def test_explicit_file_path(self, stream, tmp_path):
        """Test an explicit path is opened lazily, truncating old content."""
        path = tmp_path / "app.log"
        path.write_text("stale", encoding="utf-8")
        sinks = SinkDispatcher(stream=stream, file_path=path)
        assert path.read_text(encoding="utf-8") == "stale"

        sinks.dispatch("fresh", FILE_FLAGS)
        sinks.close()
        assert path.read_text(encoding="utf-8") == "fresh"

    def test_open_failure_skips_file(self, stream, tmp_path):
        """Test an unopenable file is skipped without raising."""
        sinks = SinkDispatcher(stream=stream, file_path=tmp_path / "missing" / "a.log")
        sinks.dispatch("one", FILE_FLAGS)
        sinks.dispatch("two", FILE_FLAGS)
        assert sinks.file is None
        assert stream.getvalue() == "onetwo"

    def test_write_failure_is_not_raised(self):
        """Test writing to a closed stream does not raise."""
        closed = StringIO()
        closed.close()
        sinks = SinkDispatcher(stream=closed)
        sinks.dispatch("lost", FormatFlags())
        sinks.report("lost too")
        sinks.close()
