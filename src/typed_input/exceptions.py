"""Exception hierarchy for typed-input.

Every failure of a read-and-parse call is reported as exactly one
subclass of :class:`InputError`.  Raw stream exceptions (``OSError``)
and parser exceptions must NEVER escape the reader — they are caught
and re-raised as one of the typed subclasses below, chained with
``raise ... from``.

Hierarchy
---------
InputError
├── EndOfInputError   (kind = EOF)
├── InputIOError      (kind = IO)
└── InputParseError   (kind = PARSE)
"""

from __future__ import annotations

import enum


class InputErrorKind(enum.Enum):
    """Tag identifying which of the three failure kinds occurred."""

    EOF = "eof"
    IO = "io"
    PARSE = "parse"


class InputError(Exception):
    """Base exception for all typed-input errors.

    Callers that want one uniform error surface catch this class; those
    that care about the failure kind dispatch on the subclass or on
    :attr:`kind`.
    """

    kind: InputErrorKind

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @classmethod
    def from_os_error(cls, exc: OSError) -> InputIOError:
        """Wrap a platform I/O failure as an :class:`InputIOError`."""
        return InputIOError(exc)


# --- End of input ----------------------------------------------------------

class EndOfInputError(InputError):
    """Raised when the input stream is exhausted before a line is read."""

    kind = InputErrorKind.EOF

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__("EOF encountered", hint=hint)


# --- Stream failures -------------------------------------------------------

class InputIOError(InputError):
    """Raised when reading the input or writing the prompt fails."""

    kind = InputErrorKind.IO

    def __init__(self, cause: OSError, *, hint: str | None = None) -> None:
        super().__init__(f"I/O error: {cause}", hint=hint)
        self.cause: OSError = cause
        """The originating stream failure."""


# --- Conversion failures ---------------------------------------------------

class InputParseError(InputError):
    """Raised when a line was read but the parser rejected it.

    The parser's failure is kept as text in :attr:`description` because
    parser exception types are caller-defined.  The original exception
    object is still reachable through ``__cause__``.
    """

    kind = InputErrorKind.PARSE

    def __init__(self, description: str, *, hint: str | None = None) -> None:
        super().__init__(f"Parse error: {description}", hint=hint)
        self.description: str = description
