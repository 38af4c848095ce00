"""Tests for the ``run``, ``generate`` and ``layout`` commands (cli/app.py).

Commands are invoked through ``main(argv)`` and their output read with
``capsys``.  Results go to stdout; rendering and logs go to stderr.
"""

from __future__ import annotations

import logging

import pytest

from keyboard_madness.cli import exit_codes
from keyboard_madness.cli.app import main
from keyboard_madness.cli.console import configure_logging
from keyboard_madness.core.layout import KEYS
from keyboard_madness.core.models import Position


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

class TestRunCommand:
    def test_default_instructions_type_hello(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["run"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "HELLO\n"

    def test_explicit_instructions(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["run", "R,S,R:2,U,S"])
        assert capsys.readouterr().out == "HI\n"

    def test_start_position(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["run", "-x", "0", "-y", "0", "L,S"])
        assert capsys.readouterr().out == "0\n"

    def test_long_position_flags(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["run", "--x-position", "9", "--y-position", "3", "S"])
        assert capsys.readouterr().out == "?\n"

    def test_negative_start_wraps(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["run", "-x", "-1", "-y", "0", "S"])
        assert capsys.readouterr().out == "0\n"

    def test_oversized_count_does_not_crash(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["run", "L:" + "7" * 5000 + ",S"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "F\n"

    def test_unknown_instructions_print_empty_line(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["run", "Z,Q:4,"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "\n"

    def test_verbose_logs_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["-v", "run", "R:3,S"])
        captured = capsys.readouterr()
        assert captured.out == "K\n"
        assert "R:3" in captured.err


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------

class TestGenerateCommand:
    def test_default_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["generate"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "R:1,S,L:3,U:1,S,R:6,D:1,S,S,U:1,S\n"

    def test_text_is_upper_cased(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", "g g"])
        assert capsys.readouterr().out == "S,_,S\n"

    def test_output_runs_back_to_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", "-x", "0", "-y", "3", "this is a test"])
        instructions = capsys.readouterr().out.strip()
        main(["run", "-x", "0", "-y", "3", instructions])
        assert capsys.readouterr().out == "THIS IS A TEST\n"


# ---------------------------------------------------------------------------
# layout
# ---------------------------------------------------------------------------

class TestLayoutCommand:
    def test_renders_every_row(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["layout"])
        assert code == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out == ""
        for key in ("Q", "G", "?", "0"):
            assert key in captured.err

    def test_plain_fallback_marks_cursor(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from keyboard_madness.cli.layout_view import _print_plain_layout

        _print_plain_layout(KEYS, Position(4, 2))
        err = capsys.readouterr().err
        assert "2 | A S D F [G] H J K L ;" in err
        assert "0 | 1 2 3 4 5 6 7 8 9 0" in err


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

class TestConfigureLogging:
    def test_default_level_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_level_is_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        configure_logging()
        count = len(logging.getLogger().handlers)
        configure_logging(verbose=True)
        assert len(logging.getLogger().handlers) == count
