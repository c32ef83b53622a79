"""Rendering of a single parsed directive into text.

Every formatter returns a ``(text, count)`` pair. ``count`` is the number of
characters the directive reports as written, which is what a caller adds to
its running total.
"""

from __future__ import annotations

import operator

from .spec import ConversionSpec, number_length

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MODULUS = 1 << 32
_INT_OFFSET = 1 << 31
_POINTER_MODULUS = 1 << 64


class _Field:
    """Working state for one numeric directive while it is being written."""

    def __init__(self, spec: ConversionSpec) -> None:
        self.minus = spec.minus
        self.zero = spec.zero
        self.alternate = spec.alternate
        self.space = spec.space
        self.plus = spec.plus
        self.width = spec.width
        self.precision = spec.precision
        self.numeric = spec.numeric
        self.length = 0
        self._parts: list[str] = []

    @property
    def min_digits(self) -> int:
        return self.precision if self.precision is not None else 0

    def emit(self, text: str) -> None:
        self._parts.append(text)

    def pad(self) -> None:
        """Write the leading fill that brings the field up to its width."""
        if not self.numeric or self.minus:
            return
        floor = max(
            self.length + int(self.plus),
            self.min_digits + int(self.space) + int(self.plus) + 2 * int(self.alternate),
        )
        count = self.width - floor
        if count > 0:
            self.emit(("0" if self.zero else " ") * count)
            self.length += count

    def leading_zeros(self, digits: int) -> int:
        """Write the zeros the precision asks for and return how many."""
        count = max(self.min_digits - digits, 0)
        self.emit("0" * count)
        return count

    def put_number(self, n: int, code: str) -> None:
        """Write the digits of ``n``, then trailing spaces when left-aligned."""
        if not (self.precision == 0 and n == 0):
            self.emit(format(n, code))
        if self.minus:
            count = self.width - self.length
            if count > 0:
                self.emit(" " * count)
                self.length += count

    def result(self) -> tuple[str, int]:
        return "".join(self._parts), self.length


def _as_char(c: object) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) % 256)


def format_char(spec: ConversionSpec, c: object) -> tuple[str, int]:
    """Render ``c`` (a one-character string or a character code)."""
    ch = _as_char(c)
    fill = " " * max(spec.width - 1, 0)
    text = ch + fill if spec.minus else fill + ch
    return text, max(1, spec.width)


def format_string(spec: ConversionSpec, s: str | None) -> tuple[str, int]:
    """Render a string; ``None`` stands for a null pointer."""
    precision = spec.precision
    if s is None:
        s = NULL_STRING
        if precision is not None:
            precision = len(NULL_STRING) if precision >= len(NULL_STRING) else 0
    elif not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    s = s.split("\0", 1)[0]
    shown = s if precision is None else s[:precision]
    fill = " " * max(spec.width - len(shown), 0)
    text = shown + fill if spec.minus else fill + shown
    return text, max(spec.width, len(shown))


def format_pointer(spec: ConversionSpec, p: int | None) -> tuple[str, int]:
    """Render an address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    p = 0 if p is None else operator.index(p) % _POINTER_MODULUS
    field = _Field(spec)
    if field.space and p:
        field.emit(" ")
        field.length += 1
    if p == 0:
        field.length += len(NULL_POINTER)
        field.precision = 0
        field.zero = False
    else:
        field.length += 2 + number_length(p, base=16)
    field.alternate = True

    if not (field.precision is None and field.zero):
        field.pad()
    if field.plus and p:
        field.emit("+")
    field.emit("0x" if p else NULL_POINTER)
    zeros = field.leading_zeros(number_length(p, base=16)) if p else 0
    if field.precision is None:
        field.pad()
    field.length += zeros + int(field.plus)
    field.put_number(p, "x")
    return field.result()


def format_signed(spec: ConversionSpec, n: int) -> tuple[str, int]:
    """Render ``n`` as a 32-bit signed decimal."""
    n = (operator.index(n) + _INT_OFFSET) % _UINT_MODULUS - _INT_OFFSET
    negative = n < 0
    magnitude = -n if negative else n
    field = _Field(spec)
    if negative:
        field.space = False
        field.plus = False
        if field.precision is not None:
            field.precision += 1
    if field.space:
        field.emit(" ")
        field.length += 1
    if not (field.precision == 0 and n == 0):
        field.length += number_length(magnitude, negative)

    if not (field.precision is None and field.zero):
        field.pad()
    if field.plus:
        field.emit("+")
    if negative:
        field.emit("-")
    if field.precision is None:
        field.pad()
    zeros = field.leading_zeros(number_length(magnitude, negative))
    field.length += zeros + int(field.plus)
    field.put_number(magnitude, "d")
    return field.result()


def format_unsigned(spec: ConversionSpec, n: int) -> tuple[str, int]:
    """Render ``n`` as a 32-bit unsigned decimal."""
    n = operator.index(n) % _UINT_MODULUS
    field = _Field(spec)
    field.space = False
    field.plus = False
    if not (field.precision == 0 and n == 0):
        field.length += number_length(n)
    field.pad()
    field.length += field.leading_zeros(number_length(n))
    field.put_number(n, "d")
    return field.result()


def format_hex(spec: ConversionSpec, n: int, upper: bool = False) -> tuple[str, int]:
    """Render ``n`` as a 32-bit unsigned hexadecimal number."""
    n = operator.index(n) % _UINT_MODULUS
    prefix = "0X" if upper else "0x"
    field = _Field(spec)
    field.space = False
    field.plus = False
    if not (field.precision == 0 and n == 0):
        field.length += number_length(n, base=16)
    if field.alternate and field.zero and n > 0:
        field.emit(prefix)
    if n == 0:
        field.alternate = False
    if field.alternate:
        field.length += 2
    field.pad()
    if field.alternate and not field.zero and n > 0:
        field.emit(prefix)
    field.length += field.leading_zeros(number_length(n, base=16))
    field.put_number(n, "X" if upper else "x")
    return field.result()


def render(spec: ConversionSpec, arg: object = None) -> tuple[str, int]:
    """Render one directive with its argument.

    ``%%`` gives a single percent sign; a directive without a valid
    conversion character gives nothing.
    """
    conversion = spec.conversion
    if conversion == "c":
        return format_char(spec, arg)
    if conversion == "s":
        return format_string(spec, arg)
    if conversion == "p":
        return format_pointer(spec, arg)
    if conversion in ("d", "i"):
        return format_signed(spec, arg)
    if conversion == "u":
        return format_unsigned(spec, arg)
    if conversion in ("x", "X"):
        return format_hex(spec, arg, upper=conversion == "X")
    if conversion == "%":
        return "%", 1
    return "", 0