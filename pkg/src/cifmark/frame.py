"""Tabular views of parser output as Polars DataFrames."""

import polars as pl

from .parser import ParseResult


__all__ = [
    "TOKENS_SCHEMA",
    "VALUES_SCHEMA",
    "tokens_frame",
    "values_frame",
]


TOKENS_SCHEMA = {
    "line": pl.UInt32,
    "start": pl.UInt32,
    "length": pl.UInt32,
    "token_type": pl.UInt8,
    "item_name": pl.String,
}
"""Schema of the DataFrame returned by `tokens_frame`."""

VALUES_SCHEMA = {
    "block": pl.UInt32,
    "category": pl.String,
    "is_in_loop_block": pl.Boolean,
    "line": pl.UInt32,
    "start": pl.UInt32,
    "length": pl.UInt32,
    "column_index": pl.UInt32,
    "item_name": pl.String,
}
"""Schema of the DataFrame returned by `values_frame`."""


def tokens_frame(result: ParseResult) -> pl.DataFrame:
    """Highlight tokens as a DataFrame, one row per token.

    Parameters
    ----------
    result
        Output of `cifmark.parse`.

    Returns
    -------
    pl.DataFrame
        DataFrame with columns `line`, `start`, `length`, `token_type`, and `item_name`
        (null for tokens without an item name).
    """
    columns = {name: [] for name in TOKENS_SCHEMA}
    for token in result.tokens:
        columns["line"].append(token.line)
        columns["start"].append(token.start)
        columns["length"].append(token.length)
        columns["token_type"].append(token.token_type)
        columns["item_name"].append(token.item_name)
    return pl.DataFrame(columns, schema=TOKENS_SCHEMA)


def values_frame(result: ParseResult) -> pl.DataFrame:
    """Value positions of all loop blocks as a DataFrame, one row per value range.

    Parameters
    ----------
    result
        Output of `cifmark.parse`.

    Returns
    -------
    pl.DataFrame
        DataFrame with columns:
        - `block`: index of the owning block in `result.loops`
        - `category`: category name of the block
        - `is_in_loop_block`: whether the block was declared by `loop_`
        - `line`, `start`, `length`: position of the value
        - `column_index`: column (field position) of the value
        - `item_name`: full data name of the column's field (null if not declared)
    """
    columns = {name: [] for name in VALUES_SCHEMA}
    for block_idx, block in enumerate(result.loops):
        for data_line in block.data_lines:
            for value_range in data_line.value_ranges:
                columns["block"].append(block_idx)
                columns["category"].append(block.category_name)
                columns["is_in_loop_block"].append(block.is_in_loop_block)
                columns["line"].append(data_line.line)
                columns["start"].append(value_range.start)
                columns["length"].append(value_range.length)
                columns["column_index"].append(value_range.column_index)
                columns["item_name"].append(block.item_name(value_range.column_index))
    return pl.DataFrame(columns, schema=VALUES_SCHEMA)
