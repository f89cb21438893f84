"""Protocols (interfaces) consumed by the core layer.

These define the contracts the reader depends on.  Standard streams,
``io.StringIO`` and test doubles all satisfy them structurally — no
explicit inheritance required.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class Parser(Protocol[T_co]):
    """Textual-parsing contract: convert one line of text into a value.

    Built-in constructors such as ``int``, ``float`` and ``str`` satisfy
    this protocol directly.
    """

    def __call__(self, text: str, /) -> T_co:
        """Return the value described by *text*.

        Raises
        ------
        Exception
            Any exception signals that *text* was rejected.  Its ``str()``
            is used as the failure description.
        """
        ...  # pragma: no cover


class LineReader(Protocol):
    """Source of input lines (e.g. ``sys.stdin``)."""

    def readline(self) -> str:
        """Return the next line including its terminator, or ``""`` at EOF.

        Raises
        ------
        OSError
            When the underlying stream fails.
        """
        ...  # pragma: no cover


class PromptWriter(Protocol):
    """Destination for prompts (e.g. ``sys.stdout``)."""

    def write(self, text: str, /) -> int:
        ...  # pragma: no cover

    def flush(self) -> None:
        ...  # pragma: no cover
