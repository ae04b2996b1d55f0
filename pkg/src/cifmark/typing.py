"""CIFMark type-hint definitions.

This module defines type-hints used throughout the package.
"""

from pathlib import Path
from typing import Literal, TypeAlias


FileLike: TypeAlias = str | bytes | Path
"""A file-like input.

- If a `pathlib.Path` is provided, it is interpreted as the path to a file.
- If `bytes` are provided, they are interpreted as the content of the file.
- If a `str` is provided, it is interpreted as the content of the file.
"""

PathLike: TypeAlias = str | Path
"""A file path, either as a string or a `pathlib.Path` object."""


OffsetUnit: TypeAlias = Literal["char", "utf-8", "utf-16"]
"""Unit in which `start`/`length` offsets within a line are counted.

- "char": Unicode code points (i.e., Python string indices).
- "utf-8": bytes of the UTF-8 encoded line.
- "utf-16": 16-bit code units of the UTF-16 encoded line,
  as used by JavaScript-based editors.
"""

CategoryName: TypeAlias = str
"""Category name of a data name, including the leading underscore.

This is the part before the first period, e.g. `_atom_site`
for the data name `_atom_site.type_symbol`.
"""

ItemName: TypeAlias = str
"""Full data name of a field, i.e. `<category>.<field>`,
e.g. `_atom_site.type_symbol`.
"""
