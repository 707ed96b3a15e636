"""Character classification and case conversion for the ASCII range.

Every function takes either a one-character string or an integer code.
Classification functions return a bool; conversions return a value of the
same kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset(b" \t\n\v\f\r")
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def is_digit(c: CharLike) -> bool:
    """True for '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_space(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return.

    Integer codes are reduced to a byte first, as an unsigned char would be.
    """
    code = _code(c)
    if not isinstance(c, str):
        code &= 0xFF
    return code in _SPACE_CODES


def is_lower(c: CharLike) -> bool:
    """True for 'a' to 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def is_upper(c: CharLike) -> bool:
    """True for 'A' to 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def _shift(c: CharLike, offset: int) -> CharLike:
    code = _code(c) + offset
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _shift(c, -_CASE_OFFSET) if is_lower(c) else c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _shift(c, _CASE_OFFSET) if is_upper(c) else c