"""CIF highlight parser.

Notes
-----
The parser makes a single forward pass over the physical lines of a CIF file.
Each line is first classified into one `LineKind` (in order of priority),
and then handed to the processing method of that kind,
which updates the parser state and emits tokens.

The cross-line state consists of:

- the current block (`LoopBlock | None`) receiving fields and values,
- whether the parser is inside a semicolon-delimited text field,
- the last bare (non-loop) category seen, and the number of its fields so far,
  used for rotating the colors of consecutive bare fields of one category.

A block is flushed to the output (only if it declares at least one field)
when it is terminated by a comment line, a data/save/global keyword,
a `loop_` keyword, a data name of another category
(or a second bare data name of the same category), or the end of the file.

Columns of values in a `loop_` block are assigned by counting all values
consumed by the block modulo the number of declared fields,
so that a table row wrapped over several lines keeps consistent columns.
"""

from __future__ import annotations

from enum import Enum
import logging

from cifmark._util import split_lines, unit_length
from cifmark.typing import OffsetUnit

from ._output import DataLine, Item, LoopBlock, ParseResult, Token, ValueRange
from ._token import (
    DATA_NAME,
    LEADING_DATA_NAME,
    TokenType,
    is_block_keyword,
    is_data_name,
    is_loop_keyword,
    rotating,
    split,
)


__all__ = [
    "CIFHighlightParser",
    "LineKind",
]


logger = logging.getLogger(__name__)


class LineKind(Enum):
    """Kinds of physical lines, in order of dispatch priority."""

    COMMENT = 1
    TEXT_FIELD_DELIMITER = 2
    TEXT_FIELD = 3
    BLANK = 4
    EMPTY = 5  # Nothing left after stripping an inline comment
    BLOCK_CODE = 6
    LOOP = 7
    NAME = 8
    VALUE = 9


class CIFHighlightParser:
    """CIF highlight parser.

    Parameters
    ----------
    text
        Content of the CIF file.
    offset_unit
        Unit in which offsets within a line are counted.

    Notes
    -----
    - Parsing never fails; malformed input degrades
      to generic tokens without structural entries.
    - The result is available as `output` right after instantiation.
    """

    def __init__(self, text: str, *, offset_unit: OffsetUnit = "char"):
        self._line_processor = {
            LineKind.COMMENT: self._process_comment,
            LineKind.TEXT_FIELD_DELIMITER: self._process_text_field_delimiter,
            LineKind.TEXT_FIELD: self._process_text_field,
            LineKind.BLANK: self._process_blank,
            LineKind.EMPTY: self._noop,
            LineKind.BLOCK_CODE: self._process_block_code,
            LineKind.LOOP: self._process_loop,
            LineKind.NAME: self._process_name,
            LineKind.VALUE: self._process_value,
        }
        """Mapping between line kind and its processing method."""

        self._lines: list[str] = split_lines(text)
        self._offset_unit: OffsetUnit = offset_unit

        # Current line
        self._curr_line_idx: int = 0
        self._curr_line: str = ""
        self._curr_tokens: list[tuple[str, bool]] = []

        # Cross-line state
        self._curr_block: LoopBlock | None = None
        self._in_text_field: bool = False
        self._last_category: str = ""
        self._category_item_count: int = 0

        self._output_loops: list[LoopBlock] = []
        self._output_tokens: list[Token] = []

        # Public attributes
        self.output: ParseResult = self._parse()
        return

    # Private Methods
    # ===============

    def _parse(self) -> ParseResult:
        for self._curr_line_idx, self._curr_line in enumerate(self._lines):
            line_kind = self._classify_line()
            self._line_processor[line_kind]()

        self._flush_block("end of file")
        logger.debug(
            "Parsed %d lines into %d blocks and %d tokens.",
            len(self._lines), len(self._output_loops), len(self._output_tokens),
        )
        return ParseResult(loops=self._output_loops, tokens=self._output_tokens)

    def _classify_line(self) -> LineKind:
        """Determine the kind of the current line, tokenizing it if needed."""
        line = self._curr_line
        if line.startswith("#"):
            return LineKind.COMMENT
        if line.startswith(";"):
            return LineKind.TEXT_FIELD_DELIMITER
        if self._in_text_field:
            return LineKind.TEXT_FIELD
        trimmed = line.strip()
        if not trimmed:
            return LineKind.BLANK

        self._curr_tokens = tokens = split(trimmed)
        if not tokens:
            return LineKind.EMPTY
        first_token, first_quoted = tokens[0]
        if is_block_keyword(first_token, first_quoted):
            return LineKind.BLOCK_CODE
        if is_loop_keyword(first_token, first_quoted):
            return LineKind.LOOP
        if is_data_name(first_token, first_quoted):
            return LineKind.NAME
        return LineKind.VALUE

    # Line Processors
    # ---------------

    def _process_comment(self) -> None:
        """Process a comment line (starting with `#`)."""
        block = self._curr_block
        if block is not None and block.items and block.names_defined:
            self._flush_block("comment")
        self._add_token(0, len(self._curr_line), TokenType.COMMENT)
        return

    def _process_text_field_delimiter(self) -> None:
        """Process a line starting with `;`, opening or closing a text field.

        The delimiter line itself is part of the value.
        Closing the text field completes one value of the current block.
        """
        closing = self._in_text_field
        self._in_text_field = not closing
        column_index = self._add_text_field_line()

        block = self._curr_block
        item_name = block.item_name(column_index) if block is not None else None
        self._add_token(0, len(self._curr_line), rotating(column_index), item_name)

        if closing and block is not None:
            block.processed_value_count += 1
            if block.items:
                block.names_defined = True
        return

    def _process_text_field(self) -> None:
        """Process a line inside a text field; its content is not tokenized."""
        column_index = self._add_text_field_line()
        if self._curr_line:
            block = self._curr_block
            item_name = block.item_name(column_index) if block is not None else None
            self._add_token(0, len(self._curr_line), rotating(column_index), item_name)
        return

    def _process_blank(self) -> None:
        """Process a blank line; it ends a run of field names without values."""
        block = self._curr_block
        if block is not None and block.items and not block.names_defined:
            block.names_defined = True
        return

    def _process_block_code(self) -> None:
        """Process a `data_`, `save_`, or `global_` line."""
        self._flush_block("block keyword")
        self._add_keyword_token(TokenType.HEADING)
        return

    def _process_loop(self) -> None:
        """Process a `loop_` line, starting a new (still empty) loop block."""
        self._flush_block("loop keyword")
        self._curr_block = LoopBlock(
            start_line=self._curr_line_idx,
            names_defined=False,
            is_in_loop_block=True,
        )
        self._last_category = ""
        self._category_item_count = 0
        self._add_keyword_token(TokenType.LOOP)
        return

    def _process_name(self) -> None:
        """Process a line starting with a data name.

        Notes
        -----
        Data names not matching `_category.field` only get a generic token.
        A value following the data name on the same line
        is assigned to the declared field.
        """
        line = self._curr_line
        data_name = self._curr_tokens[0][0]
        name_match = DATA_NAME.fullmatch(data_name)
        if name_match is None:
            idx = line.find(data_name)
            if idx >= 0:
                self._add_token(idx, len(data_name), TokenType.CATEGORY)
            return
        lead_match = LEADING_DATA_NAME.match(line)
        if lead_match is None:
            return

        category, name = name_match.group(1, 2)
        leading_length = len(lead_match.group(1))
        field_start = leading_length + len(category) + 1

        # Terminate the current block on category change,
        # or when it is a completed single-field group
        block = self._curr_block
        if (
            block is not None
            and block.names_defined
            and block.items
            and (block.category_name != category or len(block.items) == 1)
        ):
            self._flush_block(f"data name {category}.{name}")

        if self._curr_block is None:
            self._curr_block = LoopBlock(
                start_line=self._curr_line_idx,
                category_name=category,
                names_defined=True,
                is_in_loop_block=False,
            )
        block = self._curr_block
        if not block.category_name:
            block.category_name = category
        if block.category_name != category:
            self._flush_block(f"category change to {category}")
            self._curr_block = block = LoopBlock(
                start_line=self._curr_line_idx,
                category_name=category,
                names_defined=not block.is_in_loop_block,
                is_in_loop_block=block.is_in_loop_block,
            )

        block.items.append(Item(self._curr_line_idx, *self._span(field_start, len(name)), name=name))
        field_index = len(block.items) - 1

        if block.is_in_loop_block:
            color_index = 0
            field_color = rotating(field_index)
        else:
            if category != self._last_category:
                self._last_category = category
                self._category_item_count = 0
            color_index = self._category_item_count
            self._category_item_count += 1
            field_color = rotating(color_index)

        self._add_token(leading_length, len(category), TokenType.CATEGORY)
        self._add_token(leading_length + len(category), 1 + len(name), field_color)

        if len(self._curr_tokens) < 2:
            return
        value = self._curr_tokens[1][0]
        idx = line.find(value, lead_match.end())
        if idx < 0:
            return
        block.data_lines.append(
            DataLine(self._curr_line_idx, [ValueRange(*self._span(idx, len(value)), column_index=field_index)])
        )
        block.processed_value_count += 1
        self._add_token(idx, len(value), rotating(color_index), f"{category}.{name}")
        return

    def _process_value(self) -> None:
        """Process a line of values of the current block.

        Each value is located on the line after the end of the previous one,
        so that repeated values are not matched twice.
        """
        block = self._curr_block
        if block is None or not block.items:
            return
        block.names_defined = True

        line = self._curr_line
        value_ranges: list[ValueRange] = []
        search_start = 0
        for position, (value, _) in enumerate(self._curr_tokens):
            idx = line.find(value, search_start)
            if idx < 0:
                continue
            column_index = (block.processed_value_count + position) % block.field_count
            value_ranges.append(ValueRange(*self._span(idx, len(value)), column_index=column_index))
            self._add_token(idx, len(value), rotating(column_index), block.item_name(column_index))
            search_start = idx + len(value)

        if value_ranges:
            block.data_lines.append(DataLine(self._curr_line_idx, value_ranges))
            block.processed_value_count += len(self._curr_tokens)
        return

    def _noop(self) -> None:
        """No operation."""
        return

    # Private Helper Methods
    # ======================

    def _flush_block(self, reason: str) -> None:
        """Detach the current block, adding it to the output if it declares any fields."""
        block = self._curr_block
        if block is None:
            return
        if block.items:
            logger.debug(
                "Line %d: flushing block '%s' with %d items and %d values (%s).",
                self._curr_line_idx, block.category_name, len(block.items),
                block.processed_value_count, reason,
            )
            self._output_loops.append(block)
        self._curr_block = None
        return

    def _add_text_field_line(self) -> int:
        """Record the current line as (part of) a text field value of the current block.

        Returns
        -------
        int
            Column index of the text field value.
        """
        block = self._curr_block
        if block is None:
            return 0
        column_index = block.processed_value_count % block.field_count if block.is_in_loop_block else 0
        block.data_lines.append(
            DataLine(
                self._curr_line_idx,
                [ValueRange(*self._span(0, len(self._curr_line)), column_index=column_index)],
            )
        )
        return column_index

    def _add_keyword_token(self, token_type: TokenType) -> None:
        keyword = self._curr_tokens[0][0]
        idx = self._curr_line.find(keyword)
        if idx >= 0:
            self._add_token(idx, len(keyword), token_type)
        return

    def _add_token(self, start: int, length: int, token_type: int, item_name: str | None = None) -> None:
        start, length = self._span(start, length)
        self._output_tokens.append(
            Token(
                line=self._curr_line_idx,
                start=start,
                length=length,
                token_type=int(token_type),
                item_name=item_name,
            )
        )
        return

    def _span(self, start: int, length: int) -> tuple[int, int]:
        """Convert a character span on the current line to the configured offset unit."""
        if self._offset_unit == "char":
            return start, length
        line = self._curr_line
        return (
            unit_length(line[:start], self._offset_unit),
            unit_length(line[start:start + length], self._offset_unit),
        )
