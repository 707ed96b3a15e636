"""Formatted output in the style of C's printf.

Supported conversions are ``% c s p d i u x X n`` with the flags
``- 0 + space # '``, a width, a precision and the length modifiers
``l ll h hh``. Any other conversion character is written as it stands.
The count that is returned, and that ``%n`` stores, is worked out the
same way as the output: for a ``'`` grouped number it allows one
separator for every three digits.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Tuple

from .printf_spec import (
    FormatError,
    FormatSpec,
    digit_count,
    fetch_argument,
    is_type,
    parse_spec,
)

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


@dataclass
class CountRef:
    """Receives the number of characters counted so far at a ``%n`` conversion."""

    value: int = 0


def _as_signed64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= 1 << 63 else value


def _padding(width: int, zero: bool) -> str:
    return ("0" if zero else " ") * max(width, 0)


def _put_str(spec: FormatSpec, args: Iterator[Any], out: List[str]) -> int:
    text = fetch_argument(spec, args)
    if text is not None and not isinstance(text, str):
        raise TypeError(f"%s expects a string or None, got {type(text).__name__}")
    if spec.l and text and not spec.period:
        raise FormatError("wide strings are not supported")
    if text is None:
        text = "(null)"
    length = len(text)
    if spec.precision < 0:
        spec.precision = length
    if spec.period and length > spec.precision:
        length = spec.precision
    if spec.width < 0:
        spec.width = -spec.width
        spec.minus = True
    width = max(spec.width - length, 0)
    shown = text[:length]
    pad = " " * width
    out.append(shown + pad if spec.minus else pad + shown)
    return width + length


def _put_prefix(spec: FormatSpec, value: int, negative: bool, out: List[str]) -> int:
    if negative:
        out.append("-")
        value = -_as_signed64(value)
    elif spec.plus:
        out.append("+")
    elif spec.space:
        out.append(" ")
    spec.plus = False
    spec.space = False
    return value


def _put_number(spec: FormatSpec, value: int, out: List[str]) -> None:
    if not spec.precised and value == 0:
        return
    if spec.conversion != "c":
        out.append("0" * max(spec.precision, 0))
    if spec.conversion == "c":
        out.append(chr(value & 0xFF))
    elif spec.conversion == "%":
        out.append("%")
    elif spec.apo:
        out.append(f"{value:,}")
    else:
        out.append(str(value))


def _put_int(spec: FormatSpec, args: Iterator[Any], out: List[str]) -> int:
    conv = spec.conversion
    value = ord("%") if conv == "%" else fetch_argument(spec, args)
    if conv == "c" and spec.l and value > 255:
        raise FormatError(f"character code {value} is out of range for %lc")
    negative = conv != "u" and _as_signed64(value) < 0

    if conv in "c%":
        size = 1
    elif not spec.precised and value == 0:
        size = 0
    else:
        size = digit_count(value, 10, conv)

    if conv in "uc%":
        spec.space = False
    if conv in "uc%" or negative:
        spec.plus = False
    if spec.precision < 0 or conv in "c%":
        spec.precision = 0
    spec.zero = spec.zero and (spec.precision == 0 or conv == "c") and not spec.minus
    if spec.apo:
        size += size // 3
    spec.precision = max(spec.precision - size, 0)
    if negative or spec.plus or spec.space:
        size += 1
    if spec.width < 0:
        spec.width = -spec.width
        spec.minus = True
    spec.width = max(spec.width - spec.precision - size, 0)

    if spec.minus:
        value = _put_prefix(spec, value, negative, out)
        _put_number(spec, value, out)
        out.append(_padding(spec.width, spec.zero))
    else:
        if spec.zero:
            value = _put_prefix(spec, value, negative, out)
        out.append(_padding(spec.width, spec.zero))
        if not spec.zero:
            value = _put_prefix(spec, value, negative, out)
        _put_number(spec, value, out)
    return size + spec.width + spec.precision


def _put_hex_digits(spec: FormatSpec, value: int, out: List[str]) -> None:
    if not spec.precised and value == 0:
        return
    out.append("0" * spec.precision)
    if value == 0:
        out.append("0")
        return
    digits = _HEX_UPPER if spec.conversion == "X" else _HEX_LOWER
    chars = []
    while value:
        value, digit = divmod(value, 16)
        chars.append(digits[digit])
    out.append("".join(reversed(chars)))


def _put_hex(spec: FormatSpec, args: Iterator[Any], out: List[str]) -> int:
    value = fetch_argument(spec, args)
    if not spec.precised and value == 0:
        size = 0
    else:
        size = digit_count(value, 16, "u")
    spec.zero = spec.zero and not spec.period and not spec.minus
    spec.precision = max(spec.precision - size, 0)
    spec.hash = (spec.hash and value != 0) or spec.conversion == "p"
    if spec.hash:
        size += 2
    if spec.width < 0:
        spec.width = -spec.width
        spec.minus = True
    spec.width = max(spec.width - spec.precision - size, 0)

    prefix = "0X" if spec.conversion == "X" else "0x"
    if spec.minus:
        # The left-justified form always writes a lower-case prefix.
        if spec.hash:
            out.append("0x")
        _put_hex_digits(spec, value, out)
        out.append(_padding(spec.width, spec.zero))
    else:
        if spec.zero and spec.hash:
            out.append(prefix)
            spec.hash = False
        out.append(_padding(spec.width, spec.zero))
        if spec.hash:
            out.append(prefix)
        _put_hex_digits(spec, value, out)
    return size + spec.width + spec.precision


def _write_count(spec: FormatSpec, args: Iterator[Any], total: int) -> int:
    target = fetch_argument(spec, args)
    if not isinstance(target, CountRef):
        raise TypeError(f"%n expects a CountRef, got {type(target).__name__}")
    target.value = total
    return 0


def _convert(spec: FormatSpec, args: Iterator[Any], out: List[str], total: int) -> int:
    conv = spec.conversion
    if not is_type(conv):
        if not conv:
            return 0
        out.append(conv)
        return 1
    if conv == "s":
        return _put_str(spec, args, out)
    if conv in "%cdiu":
        return _put_int(spec, args, out)
    if conv in "pxX":
        return _put_hex(spec, args, out)
    return _write_count(spec, args, total)


def _render(fmt: str, args: Iterable[Any]) -> Tuple[str, int]:
    arguments = iter(args)
    out: List[str] = []
    total = 0
    pos = 0
    end = len(fmt)
    while pos < end:
        next_percent = fmt.find("%", pos)
        if next_percent < 0:
            next_percent = end
        if next_percent > pos:
            out.append(fmt[pos:next_percent])
            total += next_percent - pos
            pos = next_percent
            continue
        spec, pos = parse_spec(fmt, pos + 1, arguments)
        total += _convert(spec, arguments, out, total)
    return "".join(out), total


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    Raises ``FormatError`` when arguments run out or a wide character or
    string cannot be written.
    """
    return _render(fmt, args)[0]


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the character count."""
    text, total = _render(fmt, args)
    sys.stdout.write(text)
    return total