"""CIF line tokenizer and token (color class) types.

This module defines:

- `TokenType`: An enumeration of the color classes
  assigned to highlighted spans of a CIF file.
- `split`: A quote-aware, comment-truncating splitter
  for a single physical line of a CIF file.
- `is_data_name`, `is_loop_keyword`, `is_block_keyword`:
  Classification predicates for lexical tokens.
- `DATA_NAME` and `LEADING_DATA_NAME`: Regular expressions (regex)
  matching the `_category.field` shape of mmCIF data names.
"""

from enum import IntEnum
import re


__all__ = [
    "TokenType",
    "ROTATION_SPAN",
    "rotating",
    "split",
    "is_data_name",
    "is_loop_keyword",
    "is_block_keyword",
    "DATA_NAME",
    "LEADING_DATA_NAME",
]


class TokenType(IntEnum):
    """Color classes of highlighted spans.

    The values share one small integer space:
    `VALUE` is the base of a 7-slot rotating range (2..8)
    used for both loop columns and bare-category fields/values,
    so `LOOP` (6) and `HEADING` (8) coincide with rotation slots 4 and 6.
    Consumers map each integer to a hue, not to a meaning.
    """

    CATEGORY = 1
    VALUE = 2
    LOOP = 6
    HEADING = 8
    COMMENT = 10


ROTATION_SPAN = 7
"""Number of slots in the rotating color range starting at `TokenType.VALUE`."""


def rotating(index: int) -> int:
    """Rotating color class for the given column/field index."""
    return TokenType.VALUE + index % ROTATION_SPAN


DATA_NAME = re.compile(r"(_[A-Za-z0-9_]+)\.([A-Za-z0-9_\[\]]+)")
"""Data name of the form `_category.field`; to be used with `fullmatch`.

Group 1 is the category name (with its leading underscore),
group 2 is the field name.
"""

LEADING_DATA_NAME = re.compile(r"(\s*)(_[A-Za-z0-9_]+)\.([A-Za-z0-9_\[\]]+)")
"""Data name at the beginning of a raw line; to be used with `match`.

Group 1 captures the leading whitespace, so that offsets
are computed on the untrimmed line.
"""

_WHITESPACE = (" ", "\t")
_QUOTES = ("'", '"')


def split(line: str) -> list[tuple[str, bool]]:
    """Split a line into whitespace-delimited tokens.

    Parameters
    ----------
    line
        A single physical line (without line terminator).

    Returns
    -------
    list[tuple[str, bool]]
        Tokens in left-to-right order, each as a tuple `(text, is_quoted)`.
        Quoted tokens keep their delimiters.

    Notes
    -----
    - A quote character opens a quoted token only at a token boundary,
      i.e. at the start of the line or right after a space/tab.
      The same character closes it only if followed by a space/tab
      or the end of the line. Any other quote character is ordinary text,
      so that values like `O5'` or `C1'` are read as a single token.
    - A `#` outside an open quote ends the line (comment).
    """
    tokens: list[tuple[str, bool]] = []
    chars: list[str] = []
    quoted = False
    quote_char: str | None = None
    last = len(line) - 1

    for idx, char in enumerate(line):
        if quote_char is None:
            if char in _QUOTES and (idx == 0 or line[idx - 1] in _WHITESPACE):
                quote_char = char
                quoted = True
                chars.append(char)
                continue
            if char in _WHITESPACE:
                if chars:
                    tokens.append(("".join(chars), quoted))
                    chars = []
                    quoted = False
                continue
            if char == "#":
                break
        elif char == quote_char and (idx == last or line[idx + 1] in _WHITESPACE):
            quote_char = None
        chars.append(char)

    if chars:
        tokens.append(("".join(chars), quoted))
    return tokens


def is_data_name(token: str, quoted: bool) -> bool:
    """Whether the token is a data name (unquoted, starting with `_`)."""
    return not quoted and token.startswith("_")


def is_loop_keyword(token: str, quoted: bool) -> bool:
    """Whether the token is the `loop_` keyword."""
    return not quoted and token == "loop_"


def is_block_keyword(token: str, quoted: bool) -> bool:
    """Whether the token is a data block, save frame, or global block keyword."""
    if quoted:
        return False
    return token == "global_" or token.startswith(("data_", "save_"))
