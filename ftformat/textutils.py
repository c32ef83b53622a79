"""Small string helpers with C-library-style semantics."""

from __future__ import annotations

import operator
from itertools import islice, zip_longest

from .spec import parse_unsigned

_INT_MODULUS = 1 << 32
_INT_OFFSET = 1 << 31


def _to_int32(value: int) -> int:
    return (value + _INT_OFFSET) % _INT_MODULUS - _INT_OFFSET


def _char_code(c: object) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c) % 256


def atoi(text: str) -> int:
    """Read a leading integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. Values outside the 32-bit range wrap around.
    """
    return _to_int32(parse_unsigned(text))


def itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit signed integer."""
    return str(_to_int32(operator.index(n)))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, the whole of it when
    ``needle`` is empty, or None when there is no match.
    """
    if not needle:
        return haystack
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else haystack[index:]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first
    pair of character codes that differ, or 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(s1, s2, fillvalue="\0")
    for a, b in islice(pairs, n):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strchr(s: str, c: object) -> str | None:
    """Return ``s`` from the first occurrence of ``c``, or None.

    Searching for the NUL character yields the empty tail of the string.
    """
    ch = chr(_char_code(c))
    if ch == "\0":
        return s[s.index("\0"):] if "\0" in s else ""
    index = s.find(ch)
    return None if index < 0 else s[index:]


def strrchr(s: str, c: object) -> str | None:
    """Return ``s`` from the last occurrence of ``c``, or None.

    Searching for the NUL character yields the empty tail of the string.
    """
    ch = chr(_char_code(c))
    if ch == "\0":
        return ""
    index = s.rfind(ch)
    return None if index < 0 else s[index:]


def _shift_case(c: int | str, low: int, high: int, delta: int) -> int | str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        return chr(code + delta) if low <= code <= high else c
    code = operator.index(c)
    return code + delta if low <= code <= high else code


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; other values come back unchanged."""
    return _shift_case(c, ord("a"), ord("z"), -32)


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; other values come back unchanged."""
    return _shift_case(c, ord("A"), ord("Z"), 32)