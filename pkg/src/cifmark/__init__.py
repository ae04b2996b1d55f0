"""CIFMark: syntax highlighting and structure extraction for CIF files.

Crystallographic Information Files ([CIF](https://www.iucr.org/resources/cif/spec/version1.1))
are parsed line by line into:

- a flat list of highlight tokens (line, offset, length, color class), and
- a list of loop blocks, describing the categories, their fields,
  and the positions of the values assigned to each field.

The parser is lenient: it never fails on malformed input.
"""

from .frame import tokens_frame, values_frame
from .host import CIFHighlighter
from .parser import (
    DataLine,
    Item,
    LoopBlock,
    ParseResult,
    Token,
    TokenType,
    ValueRange,
    parse,
)
from .reader import read
from .serializer import from_json, parse_to_json, to_json

__all__ = [
    "CIFHighlighter",
    "DataLine",
    "Item",
    "LoopBlock",
    "ParseResult",
    "Token",
    "TokenType",
    "ValueRange",
    "from_json",
    "parse",
    "parse_to_json",
    "read",
    "to_json",
    "tokens_frame",
    "values_frame",
]
