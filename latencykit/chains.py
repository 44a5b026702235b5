"""Small arithmetic steps that fail by raising, and 32-bit bit reinterpretation."""

from __future__ import annotations

import struct


class ChainError(Exception):
    """Raised by a step of an arithmetic chain that cannot produce a value."""


def divide(a: int, b: int) -> int:
    """Integer quotient truncated toward zero; raise ``ChainError`` when ``b`` is 0."""
    if b == 0:
        raise ChainError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def multiply(x: int, factor: int) -> int:
    """Return ``x * factor``."""
    return x * factor


def validate_positive(x: int) -> int:
    """Return ``x`` unchanged; raise ``ChainError`` when it is negative."""
    if x < 0:
        raise ChainError("result is negative")
    return x


def byteswap32(x: int) -> int:
    """Reverse the four bytes of a 32-bit integer, returned as unsigned."""
    if not -(1 << 31) <= x < 1 << 32:
        raise ValueError(f"{x} does not fit in 32 bits")
    return int.from_bytes((x & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def float_bits(value: float) -> int:
    """Return the IEEE-754 single-precision bit pattern of ``value``."""
    return struct.unpack("<I", struct.pack("<f", value))[0]