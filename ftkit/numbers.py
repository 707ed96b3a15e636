"""Conversions between decimal text and integers."""

from __future__ import annotations

from .chars import is_digit, is_space

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one optional sign are skipped, then digits are read
    until the first non-digit. Text without digits gives 0. When the value
    leaves the 64-bit signed range the result is -1 for positive and 0 for
    negative input. The result is truncated to a 32-bit signed integer.
    """
    pos = 0
    end = len(text)
    while pos < end and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    total = 0
    while pos < end and is_digit(text[pos]):
        total = total * 10 + sign * (ord(text[pos]) - ord("0"))
        if total > _LONG_MAX:
            return -1
        if total < _LONG_MIN:
            return 0
        pos += 1
    return _to_int32(total)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading '-' if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n == 0:
        return "0"
    digits = []
    magnitude = abs(n)
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))