"""Domain models for typed-input.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and parsing from text.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Reader options
# ---------------------------------------------------------------------------

class PrintStyle(enum.Enum):
    """How the prompt is written before reading."""

    CONTINUE = "continue"
    """Write the prompt as-is; input continues on the same line."""

    NEWLINE = "newline"
    """Write the prompt followed by a newline."""


class Trim(enum.Enum):
    """Which characters are removed from the line before parsing."""

    WHITESPACE = "whitespace"
    """Strip leading and trailing whitespace, terminator included."""

    LINE_ENDING = "line_ending"
    """Strip only trailing ``\\r`` and ``\\n`` characters."""

    def apply(self, line: str) -> str:
        if self is Trim.WHITESPACE:
            return line.strip()
        return line.rstrip("\r\n")


# ---------------------------------------------------------------------------
# Example caller-defined type
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Price:
    """A monetary amount entered as ``"<currency> <amount>"``."""

    currency: str
    """Currency code or symbol (e.g. ``EUR``)."""

    amount: float
    """Numeric amount in that currency."""

    @classmethod
    def parse(cls, text: str) -> Price:
        """Parse ``"EUR 12.50"`` into a :class:`Price`.

        Raises
        ------
        ValueError
            If *text* does not have exactly two parts or the amount is
            not a number.
        """
        parts = text.split()
        if len(parts) != 2:
            raise ValueError("String must have two parts")
        currency, raw_amount = parts
        try:
            amount = float(raw_amount)
        except ValueError:
            raise ValueError(f"invalid amount: {raw_amount!r}") from None
        return cls(currency=currency, amount=amount)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:g}"
