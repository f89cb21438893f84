"""Core read-and-parse operation.

:func:`read_input_from` is the single place where a prompt is shown,
one line is read and the text is converted into the caller's type.
Streams are injected, so the function is usable with ``sys.stdin``,
``io.StringIO`` or any object satisfying the protocols in
:mod:`typed_input.core.protocols`.

Guarantees
----------
* The prompt is written and flushed before the first read.
* Exactly one ``readline()`` call and at most one parse per call.
* Only :class:`~typed_input.exceptions.InputError` subclasses escape.
* Nothing is printed besides the prompt; errors are never logged above
  DEBUG or retried.
"""

from __future__ import annotations

import logging
import sys
from typing import TypeVar

from typed_input.core.models import PrintStyle, Trim
from typed_input.core.protocols import LineReader, Parser, PromptWriter
from typed_input.exceptions import EndOfInputError, InputError, InputParseError

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _write_prompt(output: PromptWriter, prompt: str, style: PrintStyle) -> None:
    """Write *prompt* in the requested style and flush."""
    text = prompt + "\n" if style is PrintStyle.NEWLINE else prompt
    try:
        output.write(text)
        output.flush()
    except OSError as exc:
        raise InputError.from_os_error(exc) from exc
    except ValueError as exc:
        raise InputError.from_os_error(OSError(str(exc))) from exc


def _read_line(reader: LineReader) -> str:
    """Read one raw line, mapping stream failures to ``InputIOError``."""
    try:
        return reader.readline()
    except OSError as exc:
        raise InputError.from_os_error(exc) from exc
    except ValueError as exc:
        # Python reports I/O on a closed stream as ValueError.
        raise InputError.from_os_error(OSError(str(exc))) from exc


def read_input_from(
    reader: LineReader,
    parse: Parser[T],
    prompt: str | None = None,
    *,
    output: PromptWriter | None = None,
    print_style: PrintStyle = PrintStyle.CONTINUE,
    trim: Trim = Trim.WHITESPACE,
) -> T:
    """Optionally prompt, read one line from *reader* and parse it.

    Parameters
    ----------
    reader:
        Line source, typically ``sys.stdin``.
    parse:
        Callable converting the trimmed line into the result.  Any
        exception it raises is treated as a rejection.
    prompt:
        Text shown before reading.  ``None`` or ``""`` shows nothing.
    output:
        Prompt destination.  Defaults to ``sys.stdout`` at call time.
    print_style:
        Whether the prompt is followed by a newline.
    trim:
        Which characters are stripped from the line before parsing.

    Returns
    -------
    T
        Whatever *parse* returned.

    Raises
    ------
    EndOfInputError
        If the stream was exhausted before a line was read.
    InputIOError
        If writing the prompt or reading the line failed.
    InputParseError
        If *parse* rejected the line.
    """
    if prompt:
        _write_prompt(output if output is not None else sys.stdout, prompt, print_style)

    line = _read_line(reader)
    if line == "":
        logger.debug("readline() returned no data; end of input")
        raise EndOfInputError()

    candidate = trim.apply(line)
    try:
        return parse(candidate)
    except Exception as exc:
        logger.debug("Parser %r rejected %r: %s", parse, candidate, exc)
        raise InputParseError(str(exc)) from exc
