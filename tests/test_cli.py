"""Tests for the CLI entry point and its error boundary (cli/app.py)."""

from __future__ import annotations

import sys
from collections.abc import Callable
from decimal import Decimal

import pytest

from typed_input.cli import exit_codes
from typed_input.cli.app import PARSERS, cli, main
from typed_input.exceptions import EndOfInputError, InputIOError, InputParseError


class _BrokenStdout:
    def write(self, text: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self) -> None:
        raise BrokenPipeError(32, "Broken pipe")


def _run_cli(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["typed-input", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    return exc_info.value.code  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_default_type_echoes_string(
        self,
        feed_stdin: Callable[[str], object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        feed_stdin("  hello  \n")
        assert main([]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "hello\n"

    def test_int_with_prompt(
        self,
        feed_stdin: Callable[[str], object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        feed_stdin("42\r\n")
        assert main(["--type", "int", "--prompt", "Age: "]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out == "42\n"
        assert captured.err.startswith("Age: ")

    def test_newline_prompt(
        self,
        feed_stdin: Callable[[str], object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        feed_stdin("true\n")
        main(["-t", "bool", "-p", "Continue?", "--newline"])
        captured = capsys.readouterr()
        assert captured.out == "True\n"
        assert captured.err.startswith("Continue?\n")

    def test_keep_whitespace(
        self,
        feed_stdin: Callable[[str], object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        feed_stdin("  indented\n")
        main(["--keep-whitespace"])
        assert capsys.readouterr().out == "  indented\n"

    def test_price(
        self,
        feed_stdin: Callable[[str], object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        feed_stdin("EUR 12.50\n")
        main(["--type", "price"])
        assert capsys.readouterr().out == "EUR 12.5\n"

    def test_parse_error_gets_hint(
        self, feed_stdin: Callable[[str], object],
    ) -> None:
        feed_stdin("abc\n")
        with pytest.raises(InputParseError) as exc_info:
            main(["--type", "int"])
        assert exc_info.value.hint == "Enter a whole number, e.g. 42."
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_eof_propagates(self, feed_stdin: Callable[[str], object]) -> None:
        feed_stdin("")
        with pytest.raises(EndOfInputError):
            main([])

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--type", "complex"])
        assert exc_info.value.code == 2

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0


class TestParsers:
    def test_decimal_parser(self) -> None:
        assert PARSERS["decimal"]("19.99") == Decimal("19.99")

    def test_decimal_parser_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="invalid decimal literal"):
            PARSERS["decimal"]("abc")


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit_code(
        self,
        monkeypatch: pytest.MonkeyPatch,
        feed_stdin: Callable[[str], object],
    ) -> None:
        feed_stdin("5\n")
        assert _run_cli(monkeypatch, "--type", "int") == exit_codes.SUCCESS

    def test_parse_error_exit_code(
        self,
        monkeypatch: pytest.MonkeyPatch,
        feed_stdin: Callable[[str], object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        feed_stdin("five\n")
        assert _run_cli(monkeypatch, "--type", "int") == exit_codes.PARSE_ERROR
        err = capsys.readouterr().err
        assert "Parse error" in err
        assert "Enter a whole number" in err

    def test_eof_exit_code(
        self,
        monkeypatch: pytest.MonkeyPatch,
        feed_stdin: Callable[[str], object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        feed_stdin("")
        assert _run_cli(monkeypatch) == exit_codes.END_OF_INPUT
        assert "EOF encountered" in capsys.readouterr().err

    def test_io_error_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from typed_input.cli import app as app_module

        def _raise(_argv: object = None) -> int:
            raise InputIOError(OSError("gone"))

        monkeypatch.setattr(app_module, "main", _raise)
        assert _run_cli(monkeypatch) == exit_codes.IO_ERROR

    def test_broken_stdout_is_io_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        feed_stdin: Callable[[str], object],
    ) -> None:
        feed_stdin("5\n")
        monkeypatch.setattr(sys, "stdout", _BrokenStdout())
        assert _run_cli(monkeypatch, "--type", "int") == exit_codes.IO_ERROR

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from typed_input.cli import app as app_module

        def _raise(_argv: object = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _raise)
        assert _run_cli(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from typed_input.cli import app as app_module

        def _raise(_argv: object = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _raise)
        assert _run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "kaboom" in capsys.readouterr().err
