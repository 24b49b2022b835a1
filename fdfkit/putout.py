"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO

from fdfkit.convert import itoa

BUFFER_SIZE = 2048


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: Optional[str], stream: TextIO) -> None:
    """Write s; None writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_endl(s: Optional[str], stream: TextIO) -> None:
    """Write s followed by a newline."""
    put_str(s, stream)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write a 32-bit integer in decimal."""
    stream.write(itoa(n))


def _expand(fmt: str, args: list[str]) -> str:
    """Replace each %s in fmt; the last argument fills any surplus slots."""
    pieces = fmt.split("%s")
    out = [pieces[0]]
    for index, piece in enumerate(pieces[1:]):
        out.append(args[min(index, len(args) - 1)])
        out.append(piece)
    return "".join(out)[: BUFFER_SIZE - 1]


def fprintf1(stream: TextIO, fmt: str, arg: Optional[str]) -> int:
    """Write fmt with every %s replaced by arg, capped at BUFFER_SIZE - 1.

    Nothing is written when arg is None. Returns the number of characters
    written.
    """
    if arg is None:
        return 0
    text = _expand(fmt, [arg])
    stream.write(text)
    return len(text)


def fprintf2(
    stream: TextIO, fmt: str, arg1: Optional[str], arg2: Optional[str]
) -> int:
    """Write fmt with the first %s replaced by arg1 and the rest by arg2.

    The output is capped at BUFFER_SIZE - 1 characters; nothing is written
    when either argument is None. Returns the number of characters written.
    """
    if arg1 is None or arg2 is None:
        return 0
    text = _expand(fmt, [arg1, arg2])
    stream.write(text)
    return len(text)