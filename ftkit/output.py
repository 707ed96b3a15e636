"""Writing characters, strings and decimal numbers to a text stream.

Every function writes to ``stream``, or to standard output when it is
``None``.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from .numbers import itoa

_ULLONG_MASK = 2**64 - 1


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or an integer code reduced to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        text = c
    elif isinstance(c, int) and not isinstance(c, bool):
        text = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    _target(stream).write(text)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; ``None`` writes only the newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    put_str(itoa(n), stream)


def put_nbr_unsigned(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal as an unsigned 64-bit value.

    Negative numbers wrap around modulo 2**64.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    put_str(itoa(n & _ULLONG_MASK), stream)