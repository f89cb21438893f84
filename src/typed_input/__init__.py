"""typed-input — read one line of interactive input as a typed value.

Prompt, read, trim, parse, and report failures as one of three
exception kinds (end of input, I/O, parse).
"""

from typed_input.api import read_input, read_input_ln
from typed_input.core.models import PrintStyle, Trim
from typed_input.core.parsers import parse_bool, parse_char
from typed_input.core.reader import read_input_from
from typed_input.exceptions import (
    EndOfInputError,
    InputError,
    InputErrorKind,
    InputIOError,
    InputParseError,
)
from typed_input.version import __version__

__all__: list[str] = [
    "EndOfInputError",
    "InputError",
    "InputErrorKind",
    "InputIOError",
    "InputParseError",
    "PrintStyle",
    "Trim",
    "__version__",
    "parse_bool",
    "parse_char",
    "read_input",
    "read_input_from",
    "read_input_ln",
]
