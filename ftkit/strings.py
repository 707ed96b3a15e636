"""String searching, comparison, copying and splitting helpers.

Positions are returned as indexes into the searched string, or ``None``
where nothing is found. As with NUL-terminated strings, searching for
``"\\0"`` finds the end of the string.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Tuple

_NUL = "\0"


def _char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``"\\0"`` gives ``len(s)``."""
    if _char(c) == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``"\\0"`` gives ``len(s)``."""
    if _char(c) == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` in the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    size = len(needle)
    for start in range(len(haystack)):
        if length - start < size:
            break
        if haystack.startswith(needle, start):
            return start
    return None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0, or 0 when the compared parts are equal.
    """
    _non_negative(n, "n")
    pairs = zip_longest(map(ord, s1), map(ord, s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b or a == 0:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``. A size of 0 copies nothing.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create: the length
    of ``dst`` (at most ``size``) plus the length of ``src``. When ``dst``
    already fills the buffer it is returned unchanged.
    """
    _non_negative(size, "size")
    dlen = min(len(dst), size)
    if dlen < size:
        dst = dst + src[: size - dlen - 1]
    return dst, dlen + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    start, end = 0, len(s)
    while start < end and s[start] in chars:
        start += 1
    while end > start and s[end - 1] in chars:
        end -= 1
    return s[start:end]


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character of ``s``."""
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(s))