"""Formatted output driven by ``%`` directives."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence, TextIO

from .convert import render
from .spec import parse_spec

_ARGUMENT_CONVERSIONS = frozenset("cspdiuxX")


def _pieces(fmt: str, args: Sequence[object]) -> Iterator[tuple[str, int]]:
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            percent = len(fmt)
        if percent > pos:
            literal = fmt[pos:percent]
            yield literal, len(literal)
        if percent == len(fmt):
            break
        spec = parse_spec(fmt, percent + 1)
        arg = None
        if spec.conversion in _ARGUMENT_CONVERSIONS:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
        yield render(spec, arg)
        pos = spec.end


def sprintf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its directives replaced by the formatted arguments."""
    return "".join(text for text, _ in _pieces(fmt, args))


def printf(fmt: str, *args: object, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the character count the directives report.
    """
    out = sys.stdout if file is None else file
    total = 0
    for text, count in _pieces(fmt, args):
        out.write(text)
        total += count
    return total