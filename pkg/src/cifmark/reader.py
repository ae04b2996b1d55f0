"""Read and parse CIF files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._util import filelike_to_str
from .parser import parse

if TYPE_CHECKING:
    from cifmark.parser import ParseResult
    from cifmark.typing import FileLike, OffsetUnit


def read(
    file: FileLike,
    *,
    encoding: str = "utf-8",
    offset_unit: OffsetUnit = "char",
) -> ParseResult:
    """Read a CIF file and parse it into highlight tokens and loop blocks.

    Parameters
    ----------
    file
        CIF file to be parsed; either the path to the file (as `pathlib.Path`),
        or its content as `str` or `bytes`.
    encoding
        Encoding used to decode the file if it is provided as bytes or Path.
    offset_unit
        Unit in which offsets within a line are counted.

    Returns
    -------
    ParseResult
        Highlight tokens and loop blocks of the file.
    """
    text = filelike_to_str(file, encoding=encoding)
    return parse(text, offset_unit=offset_unit)
