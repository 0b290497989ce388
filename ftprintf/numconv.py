"""Integer-to-text conversions and fixed-width integer helpers."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

LONG_BITS = 64


def to_unsigned(value: int, bits: int) -> int:
    """Reinterpret ``value`` as an unsigned integer of ``bits`` width."""
    if bits <= 0:
        raise ValueError("bit width must be positive")
    return value & ((1 << bits) - 1)


def to_signed(value: int, bits: int) -> int:
    """Reinterpret ``value`` as a two's-complement integer of ``bits`` width."""
    unsigned = to_unsigned(value, bits)
    if unsigned >= 1 << (bits - 1):
        return unsigned - (1 << bits)
    return unsigned


def ultoa_base(value: int, base: int) -> str:
    """Render ``value`` as an unsigned 64-bit number in ``base``, lower case."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    number = to_unsigned(value, LONG_BITS)
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def ultoa(n: int) -> str:
    """Render ``n`` as an unsigned 64-bit decimal number."""
    return ultoa_base(n, 10)


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII letter given as a code point or a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return chr(toupper(ord(c)))
    if ord("a") <= c <= ord("z"):
        return c - 32
    return c


def decimal_length(value: int) -> int:
    """Number of characters in the decimal form of ``value``, sign included."""
    return len(str(value))