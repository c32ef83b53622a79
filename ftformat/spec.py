"""Parsing of conversion specifications and small numeric helpers."""

from __future__ import annotations

from dataclasses import dataclass

FLAG_CHARS = frozenset("-0# +")
CONVERSION_CHARS = frozenset("cspdiuxX%")
NUMERIC_CONVERSIONS = frozenset("diuxXp")

_WHITESPACE = frozenset("\t\n\v\f\r ")
_ULL_MODULUS = 1 << 64


def is_flag(c: str) -> bool:
    """Return True if ``c`` is one of the flag characters ``-0# +``."""
    return len(c) == 1 and c in FLAG_CHARS


def is_conversion(c: str) -> bool:
    """Return True if ``c`` is a supported conversion character."""
    return len(c) == 1 and c in CONVERSION_CHARS


def is_numeric_conversion(c: str) -> bool:
    """Return True if ``c`` is a conversion that takes field padding."""
    return len(c) == 1 and c in NUMERIC_CONVERSIONS


def parse_unsigned(text: str) -> int:
    """Read a leading integer as a 64-bit unsigned value.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. Negative values and overflow wrap modulo 2**64.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    digits_end = pos
    while digits_end < len(text) and "0" <= text[digits_end] <= "9":
        digits_end += 1
    value = int(text[pos:digits_end]) if digits_end > pos else 0
    return (sign * value) % _ULL_MODULUS


def number_length(n: int, negative: bool = False, base: int = 10) -> int:
    """Count the characters needed to write ``n`` in ``base``.

    One extra character is counted for a minus sign when ``negative`` is set,
    except for zero, which always takes exactly one character.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if n < 0:
        raise ValueError(f"magnitude must not be negative, got {n}")
    if n == 0:
        return 1
    length = 0
    while n > 0:
        n //= base
        length += 1
    return length + 1 if negative else length


@dataclass
class ConversionSpec:
    """One parsed ``%`` directive.

    ``precision`` is None when no precision was given. ``conversion`` is the
    empty string when the directive has no valid conversion character.
    ``end`` is the index in the format string just past the directive.
    """

    minus: bool = False
    zero: bool = False
    alternate: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int | None = None
    conversion: str = ""
    end: int = 0

    @property
    def min_digits(self) -> int:
        """The precision, or 0 when none was given."""
        return self.precision if self.precision is not None else 0

    @property
    def numeric(self) -> bool:
        """True if the conversion takes numeric field padding."""
        return is_numeric_conversion(self.conversion)


def _take_while(fmt: str, pos: int, predicate) -> int:
    while pos < len(fmt) and predicate(fmt[pos]):
        pos += 1
    return pos


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def parse_spec(fmt: str, start: int) -> ConversionSpec:
    """Parse the directive that begins at ``start``, just after a ``%``.

    The directive is flags, an optional width, an optional ``.precision``
    and one conversion character. Whatever character follows the precision
    is consumed, even when it is not a valid conversion.
    """
    if not 0 <= start <= len(fmt):
        raise ValueError(f"start {start} is outside the format string")

    spec = ConversionSpec()

    pos = _take_while(fmt, start, is_flag)
    flags = fmt[start:pos]
    spec.minus = "-" in flags
    spec.zero = "0" in flags and not spec.minus
    spec.alternate = "#" in flags
    spec.plus = "+" in flags
    spec.space = " " in flags and not spec.plus

    width_end = _take_while(fmt, pos, _is_digit)
    spec.width = parse_unsigned(fmt[pos:width_end])
    pos = width_end

    if pos < len(fmt) and fmt[pos] == ".":
        prec_end = _take_while(fmt, pos + 1, _is_digit)
        spec.precision = parse_unsigned(fmt[pos + 1:prec_end])
        pos = prec_end
        spec.zero = False

    current = fmt[pos] if pos < len(fmt) else ""
    spec.conversion = current if is_conversion(current) else ""
    spec.end = min(pos + 1, len(fmt))
    return spec