"""CLI application entry point for typed-input.

Reads one line from standard input, parses it as the requested type and
writes the value to standard output.  The prompt goes to standard error
so that only the value is captured by command substitution.  Useful in shell scripts that want
validated input without writing the read/parse/error sequence by hand::

    age=$(typed-input --type int --prompt "Age: ") || exit $?

This module is the **sole error boundary** for the application.  It
catches :class:`~typed_input.exceptions.InputError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a message on stderr and
returns a well-defined exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from typed_input.cli import exit_codes
from typed_input.cli.console import console
from typed_input.core.models import Price, PrintStyle, Trim
from typed_input.core.parsers import parse_bool, parse_char
from typed_input.core.reader import read_input_from
from typed_input.exceptions import InputError, InputErrorKind, InputParseError
from typed_input.version import __version__


def _parse_decimal(text: str) -> Decimal:
    # Decimal raises InvalidOperation, whose str() is an unhelpful class list.
    try:
        return Decimal(text)
    except InvalidOperation:
        raise ValueError(f"invalid decimal literal: {text!r}") from None


PARSERS: dict[str, Callable[[str], Any]] = {
    "str": str,
    "int": int,
    "float": float,
    "decimal": _parse_decimal,
    "bool": parse_bool,
    "char": parse_char,
    "price": Price.parse,
}
"""Parsers selectable with ``--type``."""

_HINTS: dict[str, str] = {
    "int": "Enter a whole number, e.g. 42.",
    "float": "Enter a number, e.g. 3.14.",
    "decimal": "Enter a decimal number, e.g. 19.99.",
    "bool": "Enter 'true' or 'false'.",
    "char": "Enter exactly one character.",
    "price": "Enter a currency and an amount, e.g. 'EUR 12.50'.",
}

_EXIT_CODES: dict[InputErrorKind, int] = {
    InputErrorKind.PARSE: exit_codes.PARSE_ERROR,
    InputErrorKind.EOF: exit_codes.END_OF_INPUT,
    InputErrorKind.IO: exit_codes.IO_ERROR,
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="typed-input",
        description="Read one line from stdin and print it as a typed value.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="type_name",
        choices=sorted(PARSERS),
        default="str",
        help="Type the line is parsed as (default: str).",
    )
    parser.add_argument(
        "-p",
        "--prompt",
        default=None,
        help="Prompt written to stderr before reading.",
    )
    parser.add_argument(
        "--newline",
        action="store_true",
        help="Print the prompt on its own line.",
    )
    parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Only strip the line terminator, keep other whitespace.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the typed-input CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    InputError
        Propagated to :func:`cli`, which maps it to an exit code.
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    type_name: str = args.type_name
    try:
        value = read_input_from(
            sys.stdin,
            PARSERS[type_name],
            args.prompt,
            output=sys.stderr,
            print_style=PrintStyle.NEWLINE if args.newline else PrintStyle.CONTINUE,
            trim=Trim.LINE_ENDING if args.keep_whitespace else Trim.WHITESPACE,
        )
    except InputParseError as exc:
        raise InputParseError(exc.description, hint=_HINTS.get(type_name)) from exc.__cause__

    try:
        print(value, flush=True)
    except OSError as exc:
        raise InputError.from_os_error(exc) from exc
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except InputError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(_EXIT_CODES[exc.kind])
    except KeyboardInterrupt:
        console.print("\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            f"Unexpected error. {type(exc).__name__}: {exc}",
            "Please report this issue.",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
