import pytest

from relaylog import LogLevel
from relaylog.exceptions import ConfigError
from relaylog.formatters import ConsoleFormatter, render_message
from relaylog.levels import OFF, TRACE, to_level


class TestRenderMessage:
    def test_without_args_returns_text(self):
        assert render_message("100% done", ()) == "100% done"

    def test_positional_args(self):
        assert render_message("%s took %dms", ("query", 12)) == "query took 12ms"

    def test_mapping_arg(self):
        assert render_message("%(user)s logged in", ({"user": "neo"},)) == "neo logged in"

    def test_non_string_message(self):
        assert render_message(42, ()) == "42"


class TestConsoleFormatter:
    def test_fit_right_truncates_from_left(self):
        assert ConsoleFormatter._fit_right("relaylog.connection.pool", 10) == "...on.pool"
        assert ConsoleFormatter._fit_right("db", 5) == "   db"

    def test_exception_on_following_lines(self):
        line = ConsoleFormatter.format(
            {"level": "error", "logger": "x", "message": "failed", "exception": "Traceback\nValueError: boom\n"}
        )
        first, *rest = line.split("\n")
        assert first.endswith("failed")
        assert rest == ["Traceback", "ValueError: boom"]

    def test_colored_level(self):
        line = ConsoleFormatter.format({"level": "warning", "logger": "x", "message": "m"}, use_color=True)
        assert "\x1b[33m WARNING\x1b[0m" in line

    def test_configure_columns(self):
        ConsoleFormatter.configure(level_width=5, logger_width=4, separator=" ; ", timestamp_format="%H:%M")

        line = ConsoleFormatter.format({"level": "info", "logger": "abcdef", "message": "m"})

        assert line.split(" ; ")[1:] == [" INFO", "...f", "m"]
        assert ConsoleFormatter.TIMESTAMP_WIDTH == 5


class TestLevels:
    def test_names_case_insensitive(self):
        assert to_level("trace") == TRACE
        assert to_level("Warn") == to_level("WARNING") == 30
        assert to_level(LogLevel.OFF) == OFF

    def test_numbers_pass_through(self):
        assert to_level(15) == 15

    def test_unknown_name(self):
        with pytest.raises(ConfigError, match="Unknown log level"):
            to_level("loud")
