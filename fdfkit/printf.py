"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions.

Any other character after ``%`` is written out as itself. Integers are
treated as C values: ``%d`` and ``%i`` wrap to a signed 32-bit int, ``%u``
and ``%x``/``%X`` to an unsigned 32-bit int, and ``%p`` to an unsigned
64-bit address.
"""

from __future__ import annotations

import sys
from operator import index
from typing import Any, Iterator, Optional, TextIO

from fdfkit.convert import itoa

_UINT_MASK = 0xFFFFFFFF
_ADDRESS_MASK = 0xFFFFFFFFFFFFFFFF
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
NULL_TEXT = "(null)"


def int_to_str(n: int) -> str:
    """Decimal text of n taken as a signed 32-bit int."""
    return itoa(index(n))


def uint_to_str(n: int) -> str:
    """Decimal text of n taken as an unsigned 32-bit int."""
    return str(index(n) & _UINT_MASK)


def hex_len(num: int) -> int:
    """Number of hexadecimal digits in num; 0 for 0."""
    num = index(num)
    if num < 0:
        raise ValueError("hex_len expects a non-negative number")
    length = 0
    while num:
        length += 1
        num //= 16
    return length


def _hex_digits(num: int, lower: bool) -> str:
    digits = _LOWER_DIGITS if lower else _UPPER_DIGITS
    if num == 0:
        return "0"
    out = []
    while num:
        num, rem = divmod(num, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_hex(num: int, lower: bool) -> str:
    """Hexadecimal text of num taken as an unsigned 32-bit int."""
    return _hex_digits(index(num) & _UINT_MASK, lower)


def format_pointer(address: int) -> str:
    """``0x`` followed by the lower-case hex digits of a 64-bit address."""
    return "0x" + _hex_digits(index(address) & _ADDRESS_MASK, True)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(index(value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {value!r}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handlers = {
        "c": _format_char,
        "s": _format_str,
        "p": format_pointer,
        "d": int_to_str,
        "i": int_to_str,
        "u": uint_to_str,
        "x": lambda value: format_hex(value, True),
        "X": lambda value: format_hex(value, False),
    }
    handler = handlers.get(spec)
    if handler is None:
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    return handler(value)


def format_text(fmt: str, *args: Any) -> str:
    """The text printf would write for fmt and args."""
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete '%' specifier")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default).

    Returns the number of characters written.
    """
    text = format_text(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)