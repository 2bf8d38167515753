"""Integer parsing and arithmetic helpers with C-style fixed-width results."""

from __future__ import annotations

__all__ = ["atoi", "atoi_long", "hex_digit", "hex_to_int", "power"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse_decimal(text: str) -> int:
    """Parse leading whitespace, one optional sign and a run of digits.

    Parsing stops at the first character that does not fit; no digits gives 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
    return sign * value


def atoi(text: str) -> int:
    """Parse a decimal prefix of ``text`` as a 32-bit signed integer.

    Values that do not fit wrap around as a 32-bit integer would.
    """
    return _wrap(_parse_decimal(text), 32)


def atoi_long(text: str) -> int:
    """Parse a decimal prefix of ``text`` as a 64-bit signed integer."""
    return _wrap(_parse_decimal(text), 64)


def hex_digit(ch: str) -> int:
    """Return the value of one hexadecimal digit; anything else counts as 0."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if ch in _DIGITS:
        return int(ch)
    return 0


def hex_to_int(text: str) -> int:
    """Interpret every character of ``text`` as a hexadecimal digit.

    Characters that are not hexadecimal digits count as 0. The result wraps
    as a 32-bit signed integer.
    """
    value = 0
    for ch in text:
        value = value * 16 + hex_digit(ch)
    return _wrap(value, 32)


def power(num: int, exp: int) -> int:
    """Return ``num`` raised to the non-negative ``exp``, wrapped to 32 bits."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    return _wrap(num ** exp, 32)