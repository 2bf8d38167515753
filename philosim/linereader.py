"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 8


class _Readable(Protocol[AnyStr]):
    def read(self, size: int, /) -> AnyStr:
        ...


def _find_newline(data: AnyStr) -> int:
    """Return the index of the first newline in ``data``, or -1 if there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream`` in chunks of ``buffer_size``.

    Each line keeps its trailing newline; the last line may lack one. Text
    and binary streams are both supported, and lines come back in the
    stream's own type.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _has_newline(self, data: Optional[AnyStr]) -> bool:
        return data is not None and _find_newline(data) >= 0

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        buffer = self._pending
        while not self._has_newline(buffer):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            buffer = chunk if buffer is None else buffer + chunk
        if not buffer:
            self._pending = None
            return None
        index = _find_newline(buffer)
        end = len(buffer) if index < 0 else index + 1
        line, rest = buffer[:end], buffer[end:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line