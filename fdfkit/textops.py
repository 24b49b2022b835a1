"""String helpers with C-string semantics: search, compare, copy and slice.

Searches return an index into the string, or None when nothing is found.
The bounded copy and concatenate helpers work on NUL-terminated byte
buffers held in a ``bytearray`` and modify them in place.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def _terminated(s):
    """The part of s before its first NUL, or all of s."""
    nul = "\0" if isinstance(s, str) else b"\0"
    end = s.find(nul)
    return s if end < 0 else s[:end]


def _check_dstsize(dst, dstsize: int) -> None:
    _non_negative(dstsize, "dstsize")
    if dstsize > len(dst):
        raise ValueError(
            f"dstsize {dstsize} exceeds buffer of {len(dst)} bytes"
        )


def strlen(s) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def split(s: str, c: str) -> list[str]:
    """Split s on the separator c, dropping empty fields."""
    sep = _single_char(c)
    return [part for part in s.split(sep) if part]


def strchr(s: str, c: str) -> int | None:
    """Index of the first c in s; a NUL matches the end of the string."""
    ch = _single_char(c)
    if ch == "\0":
        return strlen(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last c in s; a NUL matches the end of the string."""
    ch = _single_char(c)
    if ch == "\0":
        return strlen(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _compare(s1: str, s2: str) -> int:
    for a, b in zip_longest(s1, s2, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing characters, or 0 when equal."""
    return _compare(s1, s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like strcmp, looking at no more than the first n characters."""
    _non_negative(n, "n")
    return _compare(s1[:n], s2[:n])


def strndup(s: str, n: int) -> str:
    """Copy of at most the first n characters of s."""
    _non_negative(n, "n")
    return s[:n]


def strdup(s: str) -> str:
    """Copy of s."""
    return strndup(s, len(s))


def striteri(buf: MutableSequence, func: Callable) -> None:
    """Call func(index, item) for every item of buf.

    When func returns something other than None, the item is replaced by
    that value in place.
    """
    for index, item in enumerate(buf):
        result = func(index, item)
        if result is not None:
            buf[index] = result


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of s1 and s2."""
    return s1 + s2


def strlcpy(dst: bytearray, src, dstsize: int) -> int:
    """Copy src into dst, writing at most dstsize bytes with the NUL.

    Returns the length of src, so a result of dstsize or more means the
    copy was truncated.
    """
    _check_dstsize(dst, dstsize)
    data = _terminated(bytes(src))
    if dstsize == 0:
        return len(data)
    chunk = data[: dstsize - 1]
    dst[: len(chunk) + 1] = chunk + b"\0"
    return len(data)


def strlcat(dst: bytearray, src, dstsize: int) -> int:
    """Append src to the NUL-terminated string in dst within dstsize bytes.

    Returns the length the combined string would have had; when dst holds
    no NUL within dstsize bytes, returns the length of src plus dstsize.
    """
    _check_dstsize(dst, dstsize)
    data = _terminated(bytes(src))
    if dstsize == 0:
        return len(data)
    dst_len = strlen(bytes(dst))
    if dst_len >= dstsize:
        return len(data) + dstsize
    chunk = data[: dstsize - 1 - dst_len]
    dst[dst_len : dst_len + len(chunk) + 1] = chunk + b"\0"
    return dst_len + len(data)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from func(index, char) for every char of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """s without the leading and trailing characters found in charset."""
    if charset is None:
        raise TypeError("charset must be a string")
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s starting at start.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]