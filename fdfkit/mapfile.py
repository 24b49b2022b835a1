"""Validation and loading of height-map files.

A map file holds rows of space-separated integer heights. A height may be
followed by a colour written as ``,0xRRGGBB`` (at most six hex digits).
Every row must have as many columns as the first one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import takewhile
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from fdfkit.chars import isdigit
from fdfkit.convert import atoi
from fdfkit.lines import LineReader

DEFAULT_COLOR = 0xFFFFFF
MAX_COLOR_DIGITS = 6
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

PathLike = Union[str, Path]


class MapError(Exception):
    """A map file that cannot be read or is not well formed."""


@dataclass(frozen=True)
class Point:
    """One map vertex: grid position, height and colour."""

    x: float
    y: float
    z: float
    color: int = DEFAULT_COLOR


@dataclass
class HeightMap:
    """A grid of points stored row by row."""

    width: int = 0
    height: int = 0
    points: list[Point] = field(default_factory=list)


def _logical(line: str) -> str:
    """The part of line before its first newline or NUL."""
    for stop in ("\n", "\0"):
        end = line.find(stop)
        if end >= 0:
            line = line[:end]
    return line


def count_columns(line: Optional[str], sep: str = " ") -> int:
    """Number of sep-separated fields in line, up to its first newline."""
    if line is None:
        return 0
    return sum(1 for part in _logical(line).split(sep) if part)


def _check_color(line: str, comma: int) -> int:
    """Validate the colour that starts at line[comma]; return its length."""
    text = line[comma + 1 :]
    if text[:1] != "0" or text[1:2] not in ("x", "X"):
        raise MapError("ERROR: Invalid color value.")
    digits = "".join(takewhile(lambda ch: ch not in " \n\0", text[2:]))
    if any(ch not in _HEX_DIGITS for ch in digits):
        raise MapError("ERROR: Wrong color value.(expect 0~9 or a~f)")
    if len(digits) > MAX_COLOR_DIGITS:
        raise MapError("ERROR: Too many color value.")
    return len(digits) + 3


def check_line(line: str) -> None:
    """Raise MapError unless every field of line is a valid height."""

    def at(i: int) -> str:
        return line[i] if 0 <= i < len(line) else "\0"

    i = 0
    while at(i) != "\0":
        while at(i) == " ":
            i += 1
        if at(i) in ("+", "-"):
            i += 1
        while at(i) not in (" ", ","):
            ch = at(i)
            if not isdigit(ch) and ch not in ("\n", "\0"):
                raise MapError("ERROR: Value is invalid.(error at chk_num)")
            i += 1
            if at(i) in ("\n", "\0"):
                break
        if at(i) == ",":
            if at(i - 1) == " " or at(i + 1) == " ":
                raise MapError("ERROR: Value is invalid.(error at chk_num)")
            i += _check_color(line, i)


def _open(path: PathLike) -> TextIO:
    return open(path, encoding="utf-8", errors="replace", newline="")


def check_file(path: PathLike) -> int:
    """Validate a map file and return its number of columns.

    The first row is checked field by field; every later row must have the
    same number of columns.
    """
    try:
        handle = _open(path)
    except OSError as exc:
        raise MapError("Error: Invalid file") from exc
    with handle:
        reader = LineReader(handle)
        first = reader.read_line()
        if first is None:
            raise MapError("Error: Empty file")
        check_line(first)
        columns = count_columns(first, " ")
        for line in reader:
            if count_columns(line, " ") != columns:
                raise MapError("ERROR: The number of rows are not equal.")
    return columns


def _parse_color(text: str) -> int:
    if text[:2] in ("0x", "0X"):
        text = text[2:]
    digits = "".join(takewhile(lambda ch: ch in _HEX_DIGITS, text))
    return int(digits, 16) if digits else 0


def _row_points(line: str, y: int, width: int) -> Iterator[Point]:
    tokens = [token for token in _logical(line).split(" ") if token]
    tokens.extend([""] * (width - len(tokens)))
    for x, token in enumerate(tokens[:width]):
        _, comma, color = token.partition(",")
        yield Point(
            x=float(x),
            y=float(y),
            z=float(atoi(token)),
            color=_parse_color(color) if comma else DEFAULT_COLOR,
        )


def read_map(path: PathLike) -> HeightMap:
    """Load a map file into a HeightMap.

    The width is taken from the first row; shorter rows are padded with
    points of height 0 in the default colour and extra fields are ignored.
    """
    try:
        with _open(path) as handle:
            lines = list(LineReader(handle))
    except OSError as exc:
        raise MapError(f"failed to open map file {path}") from exc
    width = count_columns(lines[0], " ") if lines else 0
    points = [
        point
        for y, line in enumerate(lines)
        for point in _row_points(line, y, width)
    ]
    return HeightMap(width=width, height=len(lines), points=points)