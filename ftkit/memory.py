"""Byte-buffer helpers: filling, copying, searching and comparing.

Buffers are ``bytearray`` objects that are changed in place; read-only
arguments may be any bytes-like object. Byte values are reduced to the
range 0-255 the way a conversion to ``unsigned char`` would reduce them.
Asking for more bytes than a buffer holds raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _length(length: int, *buffers: BytesLike) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an integer, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(f"length {length} exceeds buffer size {len(buffer)}")
    return length


def _byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte value must be an integer, got {type(value).__name__}")
    return value & 0xFF


def mem_set(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value``; return ``buffer``."""
    _length(length, buffer)
    buffer[:length] = bytes([_byte(value)]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``; return ``buffer``."""
    return mem_set(buffer, 0, length)


def mem_cpy(dst: bytearray, src: BytesLike, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` into ``dst``; return ``dst``."""
    _length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def mem_ccpy(dst: bytearray, src: BytesLike, stop: int, length: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``stop`` byte.

    At most ``length`` bytes are copied. Returns the index in ``dst`` just
    after the copied ``stop`` byte, or ``None`` if it was not among them.
    """
    _length(length, dst, src)
    target = _byte(stop)
    found = bytes(src[:length]).find(bytes([target]))
    count = length if found < 0 else found + 1
    dst[:count] = bytes(src[:count])
    return None if found < 0 else count


def mem_move(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buffer`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    for offset, name in ((dst, "dst"), (src, "src")):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"{name} must be an integer")
        if offset < 0:
            raise ValueError(f"{name} must not be negative, got {offset}")
    _length(length)
    end = max(dst, src) + length
    if end > len(buffer):
        raise ValueError(f"region ends at {end}, past buffer size {len(buffer)}")
    buffer[dst : dst + length] = buffer[src : src + length]
    return buffer


def mem_chr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Index of the first ``value`` byte within the first ``length`` bytes, or ``None``."""
    _length(length, data)
    index = bytes(data[:length]).find(bytes([_byte(value)]))
    return None if index < 0 else index


def mem_cmp(a: BytesLike, b: BytesLike, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first differing pair, or 0."""
    _length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    for value, name in ((count, "count"), (size, "size")):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer")
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    return bytearray(count * size)