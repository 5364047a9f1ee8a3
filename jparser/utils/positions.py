"""
Byte-offset helpers for error messages.

pydantic reports JSON syntax errors as "line L column C" and validation
errors as a location path with no position at all. These helpers turn both
into positions in the raw request body.
"""

import json
import re
from json.decoder import scanstring
from typing import Dict, Optional, Sequence, Tuple, Union

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_LINE_COLUMN = re.compile(r"line (\d+) column (\d+)")

_decoder = json.JSONDecoder()

LocPart = Union[str, int]
Loc = Tuple[LocPart, ...]


def offset_from_line_column(body: bytes, message: str) -> Optional[int]:
    """
    Convert a parser message ending in "line L column C" to a byte offset.

    Columns are 1-based byte columns within the line, so the offset of the
    reported byte is the start of its line plus the column.

    Returns:
        The 1-based byte offset, or None if the message has no position.
    """
    match = _LINE_COLUMN.search(message)
    if match is None:
        return None

    line, column = int(match.group(1)), int(match.group(2))
    line_start = 0
    for _ in range(line - 1):
        newline = body.find(b"\n", line_start)
        if newline == -1:
            break
        line_start = newline + 1
    return line_start + column


def _skip_whitespace(text: str, index: int) -> int:
    return _WHITESPACE.match(text, index).end()


class PositionIndex:
    """
    Start index of every key and value in a JSON document, by location path.

    Built in a single pass over a syntactically valid document. Location
    paths use object keys and array indexes, as pydantic error locations do.
    Duplicate keys resolve to their last occurrence, which is the value the
    parser keeps.
    """

    def __init__(self, text: str):
        self.text = text
        self._values: Dict[Loc, int] = {}
        self._keys: Dict[Loc, int] = {}
        self._index_value(_skip_whitespace(text, 0), ())

    def _index_value(self, index: int, loc: Loc) -> int:
        """Record the value at text[index] and its children; return its end."""
        text = self.text
        self._values[loc] = index

        if text.startswith("{", index):
            index = _skip_whitespace(text, index + 1)
            while text.startswith('"', index):
                key_index = index
                name, index = scanstring(text, index + 1)
                index = _skip_whitespace(text, index) + 1  # ':'
                index = _skip_whitespace(text, index)
                self._keys[loc + (name,)] = key_index
                index = _skip_whitespace(text, self._index_value(index, loc + (name,)))
                if text.startswith(",", index):
                    index = _skip_whitespace(text, index + 1)
            return index + 1

        if text.startswith("[", index):
            index = _skip_whitespace(text, index + 1)
            position = 0
            while index < len(text) and not text.startswith("]", index):
                index = _skip_whitespace(text, self._index_value(index, loc + (position,)))
                if text.startswith(",", index):
                    index = _skip_whitespace(text, index + 1)
                position += 1
            return index + 1

        _, end = _decoder.raw_decode(text, index)
        return end

    def find(self, loc: Sequence[LocPart], key: bool = False) -> int:
        """
        Find where the element at `loc` starts.

        Args:
            loc: Path of object keys and array indexes
            key: Point at the member's key instead of its value

        Returns:
            0-based character index. Steps that cannot be followed (for
            example union tags pydantic adds to a location) are dropped, and
            the deepest element reached is returned.
        """
        loc = tuple(loc)
        if key and loc in self._keys:
            return self._keys[loc]
        for depth in range(len(loc), -1, -1):
            index = self._values.get(loc[:depth])
            if index is not None:
                return index
        return 0


def locate(text: str, loc: Sequence[LocPart], key: bool = False) -> int:
    """One-off PositionIndex(text).find(loc, key)."""
    return PositionIndex(text).find(loc, key=key)


def byte_offset(text: str, index: int) -> int:
    """1-based byte offset of the character at text[index]."""
    return len(text[:index].encode("utf-8")) + 1
