"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

from itertools import takewhile

INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _split_sign(text: str) -> tuple[int, str]:
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    return sign, body


def _leading_digits(body: str) -> str:
    return "".join(takewhile(lambda ch: ch in _DIGITS, body))


def _wrap(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. On overflow the result is -1 for positive input and 0 for
    negative input.
    """
    sign, body = _split_sign(text)
    value = 0
    for ch in _leading_digits(body):
        if value > INT_MAX // 10 or (value == INT_MAX // 10 and ch in "89"):
            return -1 if sign == 1 else 0
        value = value * 10 + int(ch)
    return value * sign


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit long, wrapping on overflow."""
    sign, body = _split_sign(text)
    digits = _leading_digits(body)
    value = int(digits) if digits else 0
    return _wrap(value * sign, 64)


def itoa(num: int) -> str:
    """Render a 32-bit int as decimal text."""
    return str(_wrap(num, 32))