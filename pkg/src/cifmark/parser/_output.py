"""CIF highlight parser output.

The output of the parser is a `ParseResult`, holding
a flat list of highlight `Token`s and a list of `LoopBlock`s
describing the structure (categories, fields, and value positions)
of the parsed CIF file.

All line numbers and offsets are 0-based.
Field names and their order are part of the wire format
(see `cifmark.serializer`), and `to_dict`/`from_dict`
convert between the classes and that format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


__all__ = [
    "Token",
    "Item",
    "ValueRange",
    "DataLine",
    "LoopBlock",
    "ParseResult",
]


@dataclass(frozen=True)
class Token:
    """A highlighted span within a single line.

    Attributes
    ----------
    line
        Line number.
    start
        Offset of the span within the line.
    length
        Length of the span.
    token_type
        Color class of the span (see `cifmark.TokenType`).
    item_name
        Full data name (`<category>.<field>`) of the field
        the span is a value of, if any.
    """
    line: int
    start: int
    length: int
    token_type: int
    item_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out = {
            "line": self.line,
            "start": self.start,
            "length": self.length,
            "token_type": self.token_type,
        }
        if self.item_name is not None:
            out["item_name"] = self.item_name
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        return cls(
            line=data["line"],
            start=data["start"],
            length=data["length"],
            token_type=data["token_type"],
            item_name=data.get("item_name"),
        )


@dataclass(frozen=True)
class Item:
    """A field declared within a category.

    `name` is the field name without the category prefix;
    `start` and `length` locate that field name on its line.
    """
    line: int
    start: int
    length: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "start": self.start, "length": self.length, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        return cls(line=data["line"], start=data["start"], length=data["length"], name=data["name"])


@dataclass(frozen=True)
class ValueRange:
    """Span of a single value within a line, and the column it belongs to."""
    start: int
    length: int
    column_index: int

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "length": self.length, "column_index": self.column_index}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValueRange:
        return cls(start=data["start"], length=data["length"], column_index=data["column_index"])


@dataclass
class DataLine:
    """Values of a block found on one physical line."""
    line: int
    value_ranges: list[ValueRange] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "value_ranges": [vr.to_dict() for vr in self.value_ranges]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DataLine:
        return cls(
            line=data["line"],
            value_ranges=[ValueRange.from_dict(vr) for vr in data["value_ranges"]],
        )


@dataclass
class LoopBlock:
    """A group of fields of one category, and the values assigned to them.

    A block is either declared by a `loop_` keyword (tabular data)
    or implicitly by a bare `_category.field value` line.

    Attributes
    ----------
    start_line
        Line number where the block starts.
    category_name
        Category name, including the leading underscore (e.g. `_atom_site`).
        Empty until the first field of a `loop_` block is declared.
    items
        Declared fields, in declaration order.
    names_defined
        Whether the block has moved from declaring field names
        to consuming values. Only ever switches from `False` to `True`.
    is_in_loop_block
        Whether the block was declared by a `loop_` keyword.
        Fixed at creation.
    processed_value_count
        Number of values consumed so far; never decreases.
        The column of the next value is this count
        modulo the number of declared fields.
    data_lines
        Value positions, one entry per physical line.
    """
    start_line: int
    category_name: str = ""
    items: list[Item] = field(default_factory=list)
    names_defined: bool = False
    is_in_loop_block: bool = False
    processed_value_count: int = 0
    data_lines: list[DataLine] = field(default_factory=list)

    @property
    def field_count(self) -> int:
        """Number of declared fields, but at least 1."""
        return max(len(self.items), 1)

    def item_name(self, column_index: int) -> str | None:
        """Full data name of the field at the given column, if declared."""
        if 0 <= column_index < len(self.items):
            return f"{self.category_name}.{self.items[column_index].name}"
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_line": self.start_line,
            "category_name": self.category_name,
            "items": [item.to_dict() for item in self.items],
            "names_defined": self.names_defined,
            "is_in_loop_block": self.is_in_loop_block,
            "processed_value_count": self.processed_value_count,
            "data_lines": [data_line.to_dict() for data_line in self.data_lines],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoopBlock:
        return cls(
            start_line=data["start_line"],
            category_name=data["category_name"],
            items=[Item.from_dict(item) for item in data["items"]],
            names_defined=data["names_defined"],
            is_in_loop_block=data["is_in_loop_block"],
            processed_value_count=data["processed_value_count"],
            data_lines=[DataLine.from_dict(data_line) for data_line in data["data_lines"]],
        )


@dataclass
class ParseResult:
    """Output of the CIF highlight parser.

    Attributes
    ----------
    loops
        Blocks with at least one declared field, in order of appearance.
    tokens
        Highlight tokens, in line order and,
        within each line, in column order.
    """
    loops: list[LoopBlock] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "loops": [block.to_dict() for block in self.loops],
            "tokens": [token.to_dict() for token in self.tokens],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParseResult:
        return cls(
            loops=[LoopBlock.from_dict(block) for block in data["loops"]],
            tokens=[Token.from_dict(token) for token in data["tokens"]],
        )
