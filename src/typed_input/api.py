"""Call forms bound to the process's standard streams.

``read_input()`` reads a ``str`` with no prompt; ``read_input("Age: ",
parse=int)`` prompts first.  Extra positional arguments format the
prompt, so ``read_input("Enter {}'s age: ", user, parse=int)`` works
like a format string.  :func:`read_input_ln` is the same but puts the
prompt on its own line.

The streams are looked up on :mod:`sys` at call time, so redirection
via ``monkeypatch`` or ``contextlib.redirect_stdout`` is honoured.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TypeVar, overload

from typed_input.core.models import PrintStyle, Trim
from typed_input.core.reader import read_input_from

T = TypeVar("T")


def _render_prompt(prompt: str | None, args: tuple[Any, ...]) -> str | None:
    if prompt is None or not args:
        return prompt
    try:
        return prompt.format(*args)
    except (KeyError, IndexError) as exc:
        raise ValueError(
            f"prompt {prompt!r} does not match its {len(args)} positional argument(s)"
        ) from exc


@overload
def read_input(
    prompt: str | None = ...,
    *args: Any,
    trim: Trim = ...,
) -> str: ...


@overload
def read_input(
    prompt: str | None = ...,
    *args: Any,
    parse: Callable[[str], T],
    trim: Trim = ...,
) -> T: ...


def read_input(
    prompt: str | None = None,
    *args: Any,
    parse: Callable[[str], Any] = str,
    trim: Trim = Trim.WHITESPACE,
) -> Any:
    """Prompt on the current line, then read and parse one line of stdin.

    Raises
    ------
    ValueError
        If *args* are given but *prompt* has named or out-of-range
        ``{}`` fields.  This is a programming error, not an input error.
    EndOfInputError, InputIOError, InputParseError
        See :func:`~typed_input.core.reader.read_input_from`.
    """
    return read_input_from(
        sys.stdin,
        parse,
        _render_prompt(prompt, args),
        output=sys.stdout,
        print_style=PrintStyle.CONTINUE,
        trim=trim,
    )


@overload
def read_input_ln(
    prompt: str | None = ...,
    *args: Any,
    trim: Trim = ...,
) -> str: ...


@overload
def read_input_ln(
    prompt: str | None = ...,
    *args: Any,
    parse: Callable[[str], T],
    trim: Trim = ...,
) -> T: ...


def read_input_ln(
    prompt: str | None = None,
    *args: Any,
    parse: Callable[[str], Any] = str,
    trim: Trim = Trim.WHITESPACE,
) -> Any:
    """Print the prompt on its own line, then read and parse one line."""
    return read_input_from(
        sys.stdin,
        parse,
        _render_prompt(prompt, args),
        output=sys.stdout,
        print_style=PrintStyle.NEWLINE,
        trim=trim,
    )
