"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — a value was read and printed."""

PARSE_ERROR: int = 1
"""The line was read but could not be parsed as the requested type."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

END_OF_INPUT: int = 3
"""Standard input was exhausted before a line was read."""

IO_ERROR: int = 4
"""Reading standard input or writing the prompt failed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
