"""Tests for listing, help and result rendering plus the ui helpers behind them."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

import simplemenu.ui
from simplemenu.commands import CommandListing, menu
from simplemenu.errors import ArgumentCountError, Severity
from simplemenu.interface import (
    HELP_TEXT,
    Dispatcher,
    DispatchResult,
    ResultKind,
    format_command_help,
    format_error,
    format_listing,
    render_result,
)
from simplemenu.ui import (
    ANSI,
    ColorizingStreamHandler,
    PlainFormatter,
    colorize,
    format_table,
    init_logger,
    print_line,
    rgb,
    strip_ansi,
)
from tests.conftest import APP_HANDLER_TYPES, leaf

ROWS = (
    CommandListing("file", ("f",), "File operations"),
    CommandListing("help", (), "Help"),
    CommandListing("info", ("i",), "Info", hidden=True),
    CommandListing("quit", ("q", "x"), "Quit"),
)


class TestFormatTable:
    def test_columns_align_ignoring_ansi(self) -> None:
        text = format_table([[colorize("a", "red"), "bb"], ["ccc", "d"]], headers=["H1", "H2"])
        widths = {len(strip_ansi(line)) for line in text.splitlines()}
        assert len(widths) == 1

    def test_borders_and_header_rule(self) -> None:
        lines = format_table([["x"]], headers=["Col"]).splitlines()
        assert lines[0] == lines[2] == lines[-1] == "+-----+"
        assert lines[1] == "| Col |"
        assert lines[3] == "| x   |"

    def test_without_border(self) -> None:
        assert format_table([["a", "b"]], border=False) == "| a | b |"


class TestFormatListing:
    def test_hidden_rows_are_skipped(self) -> None:
        text = format_listing(ROWS, colored=False)
        assert "info" not in text
        assert "Q, X" in text
        help_row = next(line for line in text.splitlines() if "help" in line)
        assert [cell.strip() for cell in help_row.strip("|").split("|")] == ["help", "-", "Help"]

    def test_truncation(self) -> None:
        text = format_listing(ROWS, colored=False, max_items=1)
        assert "file" in text
        assert "quit" not in text
        assert text.endswith("... and 2 more")

    def test_empty(self) -> None:
        assert format_listing([], colored=False) == "No commands available."

    def test_colored_names(self) -> None:
        assert "\x1b[" in format_listing(ROWS, colored=True)


class TestFormatCommandHelp:
    def test_leaf(self) -> None:
        cmd = leaf("load", ["l"])
        cmd.usage = "load <filename>"
        cmd.example = "load notes.txt"
        text = format_command_help(cmd, colored=False)
        assert text.splitlines()[:2] == ["LOAD", "===="]
        assert "Usage:       load <filename>" in text
        assert "Example:     load notes.txt" in text

    def test_menu_lists_subcommands(self) -> None:
        text = format_command_help(menu("edit", "Edit", [leaf("axis", ["a"])]), colored=False)
        assert "Aliases:     (none)" in text
        assert "Subcommands:" in text
        assert "axis" in text


class TestFormatError:
    @pytest.mark.parametrize("severity, fancy, plain", [
        (Severity.WARNING, "⚠️", "!"),
        (Severity.ERROR, "❌", "X"),
        (Severity.CRITICAL, "💥", "!!"),
    ])
    def test_icons(self, severity: Severity, fancy: str, plain: str) -> None:
        assert format_error("bad", severity, colored=False) == f"{fancy} bad"
        assert format_error("bad", severity, colored=False, unicode=False) == f"{plain} bad"


class TestRenderResult:
    def test_enter_and_exit_print_nothing(self) -> None:
        assert render_result(DispatchResult(ResultKind.ENTERED)) is None
        assert render_result(DispatchResult(ResultKind.EXITED)) is None

    def test_empty_output_prints_nothing(self) -> None:
        assert render_result(DispatchResult(ResultKind.OUTPUT, message="")) is None

    def test_unknown_command(self, dispatcher: Dispatcher) -> None:
        text = render_result(dispatcher.dispatch("fil"), colored=False, unicode=False)
        lines = text.splitlines()
        assert lines[0] == "! Invalid command: 'fil'"
        assert lines[1] == "Did you mean: file?"
        assert "| file " in text
        assert lines[-1] == HELP_TEXT

    def test_argument_errors_show_usage(self, dispatcher: Dispatcher) -> None:
        dispatcher.dispatch("file")
        result = dispatcher.dispatch("load")
        assert isinstance(result.error, ArgumentCountError)
        text = render_result(result, colored=False, unicode=False)
        assert text == "! Too few arguments: expected 1, found 0\nUsage: load <filename>"

    def test_plain_failure_is_an_error(self) -> None:
        text = render_result(DispatchResult(ResultKind.FAILED, message="nope"), colored=False)
        assert text == "❌ nope"


class TestAnsiHelpers:
    def test_rgb(self) -> None:
        assert rgb(0, 215, 135) == "\x1b[38;2;0;215;135m"
        assert rgb(-5, 300, 1) == "\x1b[38;2;0;255;1m"

    def test_colorize_unknown_style_is_noop(self) -> None:
        assert colorize("text", "nope") == "text"
        assert strip_ansi(colorize("text", "bold", "red")) == "text"

    def test_style_table_holds_the_rendered_styles(self) -> None:
        assert set(ANSI) == {
            "reset", "bold", "red", "green", "yellow", "magenta", "cyan", "bright_black"}
        assert ANSI["bold"] == "\x1b[1m"
        assert ANSI["bright_black"] == "\x1b[90m"
        assert colorize("ok", "green") == "\x1b[32mok\x1b[0m"

    def test_print_line_follows_current_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_line("hello")
        print_line()
        assert capsys.readouterr().out == "hello\n\n"

    def test_print_line_to_explicit_stream(self) -> None:
        stream = io.StringIO()
        print_line("x", file=stream, flush=True)
        assert stream.getvalue() == "x\n"

    def test_ui_surface(self) -> None:
        assert sorted(simplemenu.ui.__all__) == sorted([
            "ANSI", "ANSI_REGEX", "strip_ansi", "enable_windows_vt", "colorize", "rgb",
            "print_line", "format_table", "init_logger", "ColorizingStreamHandler",
            "PlainFormatter"])


class TestLogging:
    def test_plain_stream_gets_no_escapes(self) -> None:
        stream = io.StringIO()
        handler = ColorizingStreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        record = logging.LogRecord("t", logging.ERROR, __file__, 1, colorize("boom", "red"), None, None)
        handler.emit(record)
        assert stream.getvalue() == "boom\n"

    def test_plain_formatter_strips_ansi(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "%s", (colorize("x", "green"),), None)
        assert PlainFormatter("%(message)s").format(record) == "x"

    def test_init_logger_is_idempotent(self, tmp_path: Path) -> None:
        logfile = tmp_path / "menu.log"
        logger = init_logger("simplemenu", level=logging.WARNING, logfile=logfile)
        init_logger("simplemenu", level=logging.WARNING, logfile=logfile)
        installed = [h for h in logger.handlers if isinstance(h, APP_HANDLER_TYPES)]
        assert sorted(type(h).__name__ for h in installed) == [
            "ColorizingStreamHandler", "RotatingFileHandler"]
        logging.getLogger("simplemenu.interface.dispatcher").debug("resolved %s", "file")
        for handler in installed:
            handler.flush()
        assert "resolved file" in logfile.read_text(encoding="utf-8")

    def test_init_logger_leaves_foreign_handlers_alone(self) -> None:
        logger = logging.getLogger("simplemenu")
        foreign = logging.StreamHandler(io.StringIO())
        logger.addHandler(foreign)
        try:
            init_logger("simplemenu", level=logging.INFO)
            installed = [h for h in logger.handlers if isinstance(h, APP_HANDLER_TYPES)]
            assert len(installed) == 1
            assert foreign in logger.handlers
        finally:
            logger.removeHandler(foreign)
