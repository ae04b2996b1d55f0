"""Utility functions."""

from pathlib import Path
from typing import get_args

from .typing import FileLike, OffsetUnit


def filelike_to_str(file: FileLike, encoding: str = "utf-8") -> str:
    """Convert a file-like input to a string.

    Parameters
    ----------
    file
        File-like input to be converted to a string.
    encoding
        Encoding used to decode the file if it is provided as bytes or Path.

    Returns
    -------
    file_content
        Content of the file as a string.
    """
    if isinstance(file, Path):
        return file.read_text(encoding=encoding)
    if isinstance(file, bytes):
        return file.decode(encoding=encoding)
    if isinstance(file, str):
        return file
    raise ValueError(
        "Parameter `file` expects either a string, bytes, or Path, but the type of input argument "
        f"was '{type(file)}'. Input was: {file}."
    )


def split_lines(text: str) -> list[str]:
    """Split text into physical lines.

    Lines are separated by `\\n` only; a single trailing `\\r`
    is removed from each line, and a terminal newline
    does not start an additional (empty) line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def check_offset_unit(offset_unit: OffsetUnit) -> OffsetUnit:
    """Verify that `offset_unit` is one of the supported units."""
    allowed = get_args(OffsetUnit)
    if offset_unit not in allowed:
        raise ValueError(
            f"Parameter `offset_unit` expects one of {allowed}, "
            f"but the input argument was: {offset_unit!r}."
        )
    return offset_unit


def unit_length(text: str, offset_unit: OffsetUnit) -> int:
    """Length of `text` counted in the given offset unit."""
    if offset_unit == "char" or text.isascii():
        return len(text)
    if offset_unit == "utf-8":
        return len(text.encode("utf-8", errors="surrogatepass"))
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2
