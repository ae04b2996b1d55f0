"""Stateless parser facade for embedding hosts."""

from typing import Any

from ._util import check_offset_unit
from .parser import parse
from .typing import OffsetUnit


__all__ = [
    "CIFHighlighter",
]


class CIFHighlighter:
    """CIF highlighter for editor and inspector hosts.

    Each call parses the whole text anew and returns
    plain JSON-compatible structures (dicts and lists);
    no state is kept between calls.

    Parameters
    ----------
    offset_unit
        Unit in which offsets within a line are counted.
        Editors running on JavaScript typically need "utf-16".
    """

    def __init__(self, offset_unit: OffsetUnit = "char"):
        self._offset_unit: OffsetUnit = check_offset_unit(offset_unit)
        return

    @property
    def offset_unit(self) -> OffsetUnit:
        """Unit in which offsets within a line are counted."""
        return self._offset_unit

    def parse(self, text: str) -> dict[str, Any]:
        """Parse text and return both loops and tokens."""
        return parse(text, offset_unit=self._offset_unit).to_dict()

    def parse_tokens(self, text: str) -> list[dict[str, Any]]:
        """Parse text and return only the highlight tokens."""
        result = parse(text, offset_unit=self._offset_unit)
        return [token.to_dict() for token in result.tokens]

    def parse_loops(self, text: str) -> list[dict[str, Any]]:
        """Parse text and return only the loop blocks."""
        result = parse(text, offset_unit=self._offset_unit)
        return [block.to_dict() for block in result.loops]

    def __repr__(self) -> str:
        return f"CIFHighlighter(offset_unit={self._offset_unit!r})"
