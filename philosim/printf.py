"""A small formatted printer that can switch its output to standard error."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import groupby

__all__ = ["Chunk", "to_hex", "format_pointer", "render", "printf"]

STDOUT = 1
STDERR = 2

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


@dataclass(frozen=True)
class Chunk:
    """A run of rendered text bound for one output descriptor (1 or 2)."""

    fd: int
    text: str


def to_hex(value: int, upper: bool = False) -> str:
    """Render ``value`` as an unsigned 64-bit hexadecimal number."""
    value %= 1 << 64
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if not value:
            break
    return "".join(reversed(out))


def format_pointer(value: int) -> str:
    """Render an address as ``0x`` and hex digits, or ``(nil)`` for zero."""
    if value % (1 << 64) == 0:
        return "(nil)"
    return "0x" + to_hex(value)


def _to_int32(value: int) -> int:
    value %= 1 << 32
    return value - (1 << 32) if value >= 1 << 31 else value


def _to_uint32(value: int) -> int:
    return value % (1 << 32)


def _render_char(arg: object) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c expects a single character")
        return arg
    if isinstance(arg, int):
        return chr(arg % 256)
    raise TypeError("%c expects an int or a single character")


def _render_string(arg: object) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError("%s expects a string or None")
    return arg


def _require_int(arg: object, conversion: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{conversion} expects an int")
    return arg


def _convert(conversion: str, arg: object) -> str:
    if conversion == "c":
        return _render_char(arg)
    if conversion == "s":
        return _render_string(arg)
    if conversion in ("d", "i"):
        return str(_to_int32(_require_int(arg, conversion)))
    if conversion == "u":
        return str(_to_uint32(_require_int(arg, conversion)))
    if conversion == "p":
        return format_pointer(_require_int(arg, conversion))
    if conversion in ("x", "X"):
        return to_hex(_to_uint32(_require_int(arg, conversion)), conversion == "X")
    raise ValueError(f"unsupported conversion {conversion!r}")


_CONSUMING = frozenset("csdiupxX")


def render(fmt: str, *args: object) -> list[Chunk]:
    """Render ``fmt`` with ``args`` into chunks grouped by output descriptor.

    ``%2`` sends everything after it to standard error. Unknown conversions
    and a trailing ``%`` produce nothing.
    """
    remaining = iter(args)
    fd = STDOUT
    pieces: list[tuple[int, str]] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append((fd, ch))
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        if conversion == "%":
            pieces.append((fd, "%"))
        elif conversion == "2":
            fd = STDERR
        elif conversion in _CONSUMING:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            pieces.append((fd, _convert(conversion, arg)))
    chunks = [
        Chunk(key, "".join(text for _, text in group))
        for key, group in groupby(pieces, key=lambda piece: piece[0])
    ]
    return [chunk for chunk in chunks if chunk.text]


def printf(fmt: str, *args: object) -> int:
    """Write ``fmt`` rendered with ``args`` and return the characters written."""
    written = 0
    for chunk in render(fmt, *args):
        stream = sys.stderr if chunk.fd == STDERR else sys.stdout
        stream.write(chunk.text)
        stream.flush()
        written += len(chunk.text)
    return written