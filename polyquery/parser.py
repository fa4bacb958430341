"""Reading points and polygons from their text form.

A point is written ``(x;y)``. A polygon is a vertex count of at least three
followed by that many points, all on one line. Whitespace may appear between
the parts of a point, as it may between the points themselves.
"""

from __future__ import annotations

import re
from typing import TextIO

from polyquery.geometry import Point, Polygon

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INTEGER = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MIN_VERTEXES = 3


class PolygonParseError(ValueError):
    """Raised when text does not hold a well-formed point or polygon."""


class _Cursor:
    """A read position in a piece of text, tracking whether its end was hit."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.eof = False

    def _fail(self, message: str) -> PolygonParseError:
        return PolygonParseError(f"{message} at offset {self.pos}")

    def peek(self) -> str:
        """Return the next character without consuming it, or '' at the end."""
        if self.pos >= len(self.text):
            self.eof = True
            return ""
        return self.text[self.pos]

    def skip_whitespace(self) -> None:
        while self.peek() in _WHITESPACE and self.peek():
            self.pos += 1

    def read_char(self) -> str:
        self.skip_whitespace()
        char = self.peek()
        if not char:
            raise self._fail("unexpected end of input")
        self.pos += 1
        return char

    def read_int(self) -> int:
        self.skip_whitespace()
        if not self.peek():
            raise self._fail("expected an integer, found end of input")
        match = _INTEGER.match(self.text, self.pos)
        if match is None:
            raise self._fail("expected an integer")
        self.pos = match.end()
        self.peek()
        value = int(match.group())
        if not _INT_MIN <= value <= _INT_MAX:
            raise self._fail(f"integer {match.group()} out of range")
        return value

    def skip_line(self) -> bool:
        """Move past the next newline; return False if there is none."""
        newline = self.text.find("\n", self.pos)
        if newline < 0:
            self.pos = len(self.text)
            self.eof = True
            return False
        self.pos = newline + 1
        return True


def _read_point(cursor: _Cursor) -> Point:
    opening = cursor.read_char()
    x = cursor.read_int()
    separator = cursor.read_char()
    y = cursor.read_int()
    closing = cursor.read_char()
    if (opening, separator, closing) != ("(", ";", ")"):
        raise PolygonParseError(
            f"malformed point {opening}{x}{separator}{y}{closing}; expected (x;y)"
        )
    return Point(x, y)


def _read_polygon(cursor: _Cursor) -> Polygon:
    count = cursor.read_int()
    if count < _MIN_VERTEXES:
        raise PolygonParseError(
            f"a polygon needs at least {_MIN_VERTEXES} vertices, got {count}"
        )
    points = []
    for _ in range(count):
        if cursor.peek() == "\n":
            raise PolygonParseError(
                f"line ended after {len(points)} of {count} vertices"
            )
        points.append(_read_point(cursor))
    if cursor.peek() not in ("", "\n"):
        raise PolygonParseError(f"unexpected text after {count} vertices")
    return Polygon(tuple(points))


def parse_point(token: str) -> Point:
    """Parse a single point written as ``(x;y)``."""
    cursor = _Cursor(token)
    point = _read_point(cursor)
    cursor.skip_whitespace()
    if cursor.peek():
        raise PolygonParseError(f"unexpected text after point in {token!r}")
    return point


def parse_polygon(text: str) -> Polygon:
    """Parse the polygon at the start of ``text``.

    The polygon must end at the end of the text or at a newline.
    """
    return _read_polygon(_Cursor(text))


def load_polygons(stream: TextIO) -> list[Polygon]:
    """Read every well-formed polygon from a text stream.

    A polygon that fails to parse is dropped together with the rest of the
    line on which the failure was found; reading resumes on the next line.
    """
    cursor = _Cursor(stream.read())
    polygons: list[Polygon] = []
    while True:
        try:
            polygons.append(_read_polygon(cursor))
        except PolygonParseError:
            if cursor.eof or not cursor.skip_line():
                break
    return polygons