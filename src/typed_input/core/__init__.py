"""Core layer — the read-and-parse operation and its pure helpers.

Rules
-----
* No ``print()`` calls; the prompt is the only output.
* No imports from ``cli``.
* Streams are injected, never opened here.
"""

from typed_input.core.models import Price, PrintStyle, Trim
from typed_input.core.parsers import parse_bool, parse_char
from typed_input.core.protocols import LineReader, Parser, PromptWriter
from typed_input.core.reader import read_input_from

__all__: list[str] = [
    "LineReader",
    "Parser",
    "Price",
    "PrintStyle",
    "PromptWriter",
    "Trim",
    "parse_bool",
    "parse_char",
    "read_input_from",
]
