"""JSON serialization of parser output.

The JSON document has the shape:

```
ParseResult := { loops: LoopBlock[], tokens: Token[] }
LoopBlock   := { start_line, category_name, items: Item[], names_defined,
                 is_in_loop_block, processed_value_count, data_lines: DataLine[] }
Item        := { line, start, length, name }
DataLine    := { line, value_ranges: ValueRange[] }
ValueRange  := { start, length, column_index }
Token       := { line, start, length, token_type, item_name? }
```

Field names are part of the wire format;
`item_name` is omitted from tokens without one.
"""

import json
import logging

from .parser import ParseResult, parse
from .typing import OffsetUnit


__all__ = [
    "from_json",
    "parse_to_json",
    "to_json",
]


logger = logging.getLogger(__name__)


def to_json(result: ParseResult) -> str:
    """Serialize a parse result to a compact JSON document.

    The output is deterministic: equal results give identical documents.
    """
    return json.dumps(result.to_dict(), ensure_ascii=False, separators=(",", ":"))


def from_json(document: str | bytes) -> ParseResult:
    """Deserialize a JSON document produced by `to_json`.

    Raises
    ------
    ValueError
        If the document is not valid JSON.
    KeyError
        If a required field is missing.
    """
    return ParseResult.from_dict(json.loads(document))


def parse_to_json(text: str, *, offset_unit: OffsetUnit = "char") -> str:
    """Parse a CIF file and serialize the result to JSON.

    Returns an empty string if the result cannot be encoded.
    """
    result = parse(text, offset_unit=offset_unit)
    try:
        return to_json(result)
    except (TypeError, ValueError) as e:
        logger.warning("Failed to encode parse result to JSON: %s", e)
        return ""
