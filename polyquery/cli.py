"""Command interpreter answering queries about a file of polygons.

Usage: ``polyquery FILE``. Polygons are read from FILE, then commands are
read from standard input, one answer per line.
"""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterator, Sequence, TextIO

from polyquery.geometry import (
    AREA,
    EVEN,
    ODD,
    VERTEXES,
    Polygon,
    area_even_odd,
    area_mean,
    area_num_of_vertexes,
    count_even_odd,
    count_intersecting,
    count_rects,
    count_vertexes,
    max_metric,
    min_metric,
)
from polyquery.parser import PolygonParseError, load_polygons, parse_polygon

INVALID_COMMAND = "<INVALID COMMAND>"

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = re.compile(r"[0-9]+")
_MIN_VERTEXES = 3


class InvalidCommand(Exception):
    """Raised when a command or its argument cannot be carried out."""


class _Tokens:
    """Whitespace-separated words read from text, with line skipping."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def next_token(self) -> str | None:
        self._skip_whitespace()
        if self.pos >= len(self.text):
            return None
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in _WHITESPACE:
            self.pos += 1
        return self.text[start:self.pos]

    def skip_line(self) -> None:
        newline = self.text.find("\n", self.pos)
        self.pos = len(self.text) if newline < 0 else newline + 1

    def read_polygon(self) -> Polygon:
        self._skip_whitespace()
        if self.pos >= len(self.text):
            raise InvalidCommand("missing polygon")
        newline = self.text.find("\n", self.pos)
        end = len(self.text) if newline < 0 else newline
        segment = self.text[self.pos:end]
        self.pos = end
        try:
            return parse_polygon(segment)
        except PolygonParseError as exc:
            raise InvalidCommand(str(exc)) from exc


def _format_real(value: float) -> str:
    return f"{value:.1f}"


def _read_arg(tokens: _Tokens) -> str:
    arg = tokens.next_token()
    if arg is None:
        raise InvalidCommand("missing argument")
    return arg


def _vertex_count(arg: str) -> int:
    if not _DIGITS.fullmatch(arg):
        raise InvalidCommand(f"unknown argument {arg!r}")
    count = int(arg)
    if count < _MIN_VERTEXES:
        raise InvalidCommand(f"vertex count {count} is below {_MIN_VERTEXES}")
    return count


def _area(command: str, tokens: _Tokens, polygons: Sequence[Polygon]) -> str:
    arg = _read_arg(tokens)
    if arg in (ODD, EVEN):
        return _format_real(area_even_odd(arg, polygons))
    if arg == "MEAN":
        if not polygons:
            raise InvalidCommand("no polygons to average")
        return _format_real(area_mean(polygons))
    return _format_real(area_num_of_vertexes(_vertex_count(arg), polygons))


def _extreme(command: str, tokens: _Tokens, polygons: Sequence[Polygon]) -> str:
    if not polygons:
        raise InvalidCommand("no polygons to compare")
    arg = _read_arg(tokens)
    if arg not in (AREA, VERTEXES):
        raise InvalidCommand(f"unknown argument {arg!r}")
    pick = max_metric if command == "MAX" else min_metric
    return _format_real(float(pick(arg, polygons)))


def _count(command: str, tokens: _Tokens, polygons: Sequence[Polygon]) -> str:
    arg = _read_arg(tokens)
    if arg in (EVEN, ODD):
        return str(count_even_odd(arg, polygons))
    return str(count_vertexes(_vertex_count(arg), polygons))


def _rects(command: str, tokens: _Tokens, polygons: Sequence[Polygon]) -> str:
    return str(count_rects(polygons))


def _intersections(command: str, tokens: _Tokens, polygons: Sequence[Polygon]) -> str:
    target = tokens.read_polygon()
    return str(count_intersecting(polygons, target))


_HANDLERS: dict[str, Callable[[str, _Tokens, Sequence[Polygon]], str]] = {
    "AREA": _area,
    "MAX": _extreme,
    "MIN": _extreme,
    "COUNT": _count,
    "RECTS": _rects,
    "INTERSECTIONS": _intersections,
}


def process_commands(stream: TextIO, polygons: Sequence[Polygon]) -> Iterator[str]:
    """Run every command in ``stream`` and yield one answer line for each.

    A command that cannot be carried out yields ``<INVALID COMMAND>`` and the
    rest of the line it was found on is discarded.
    """
    tokens = _Tokens(stream.read())
    while (command := tokens.next_token()) is not None:
        handler = _HANDLERS.get(command)
        try:
            if handler is None:
                raise InvalidCommand(f"unknown command {command!r}")
            answer = handler(command, tokens, polygons)
        except InvalidCommand:
            tokens.skip_line()
            answer = INVALID_COMMAND
        yield answer


def main(argv: Sequence[str] | None = None) -> int:
    """Load polygons from the file named in ``argv`` and answer stdin queries."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: incorrect file", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as source:
            polygons = load_polygons(source)
    except OSError:
        print("Error: cannot open file", file=sys.stderr)
        return 1
    for line in process_commands(sys.stdin, polygons):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())