"""CIF highlight parser."""

from cifmark._util import check_offset_unit
from cifmark.typing import OffsetUnit

from ._parser import CIFHighlightParser, LineKind
from ._output import DataLine, Item, LoopBlock, ParseResult, Token, ValueRange
from ._token import TokenType, is_block_keyword, is_data_name, is_loop_keyword, split

__all__ = [
    "CIFHighlightParser",
    "DataLine",
    "Item",
    "LineKind",
    "LoopBlock",
    "ParseResult",
    "Token",
    "TokenType",
    "ValueRange",
    "is_block_keyword",
    "is_data_name",
    "is_loop_keyword",
    "parse",
    "split",
]


def parse(text: str, *, offset_unit: OffsetUnit = "char") -> ParseResult:
    """Parse a CIF file into highlight tokens and loop blocks.

    Parameters
    ----------
    text
        Content of the CIF file.
    offset_unit
        Unit in which `start`/`length` offsets within a line are counted; one of:
        - "char": Unicode code points (default)
        - "utf-8": bytes of the UTF-8 encoded line
        - "utf-16": UTF-16 code units, as used by JavaScript-based editors

    Returns
    -------
    ParseResult
        Highlight tokens and loop blocks of the file.
        Malformed input never raises; it degrades to generic tokens.
    """
    parser = CIFHighlightParser(text, offset_unit=check_offset_unit(offset_unit))
    return parser.output
