"""Tests for timestamped console output."""

import io
import re

from borc import output

TIMESTAMP = r"\d{2}:\d{2}\.\d{2}"


class TestOutput:
    """Test message formatting and verbose filtering."""

    def test_log_prefixes_timestamp(self):
        stream = io.StringIO()
        output.init_timer(stream)

        output.log("Building package")

        assert re.fullmatch(rf"{TIMESTAMP} Building package\n", stream.getvalue())

    def test_log_phase(self):
        stream = io.StringIO()
        output.init_timer(stream)

        output.log_phase(2, 3, "Building component 'app'...")

        assert stream.getvalue().endswith(" [2/3] Building component 'app'...\n")

    def test_log_file_cached_suffix(self):
        stream = io.StringIO()
        output.init_timer(stream)
        output.set_verbose(True)

        output.log_file("app", "main.cpp", cached=True)
        output.log_file("app", "util.cpp")

        lines = stream.getvalue().splitlines()
        assert lines[0].endswith("      [app] main.cpp (cached)")
        assert lines[1].endswith("      [app] util.cpp")

    def test_verbose_only_messages_are_filtered(self):
        stream = io.StringIO()
        output.init_timer(stream)

        output.log("hidden", verbose_only=True)
        output.log_detail("hidden", verbose_only=True)
        output.log_file("app", "main.cpp")

        assert stream.getvalue() == ""
        assert output.is_verbose() is False

    def test_defaults_to_stdout(self, capsys):
        output.log_detail("Executable: app")

        assert capsys.readouterr().out.endswith("      Executable: app\n")

    def test_format_timestamp_starts_near_zero(self):
        output.init_timer(io.StringIO())
        assert output.format_timestamp().startswith("00:00.")
