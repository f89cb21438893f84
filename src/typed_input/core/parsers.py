"""Strict text parsers for types whose constructor is too lenient.

``bool("no")`` is ``True``, so ``bool`` cannot be handed to the reader
as-is.  Every function here is a pure ``str -> T`` transformation that
raises ``ValueError`` on rejection.
"""

from __future__ import annotations


def parse_bool(text: str) -> bool:
    """Accept exactly ``"true"`` or ``"false"``."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("provided string was not `true` or `false`")


def parse_char(text: str) -> str:
    """Accept exactly one character."""
    if not text:
        raise ValueError("cannot parse char from empty string")
    if len(text) > 1:
        raise ValueError("too many characters in string")
    return text
