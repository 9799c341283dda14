"""A buffered writer with JSON-specific write operations."""

from __future__ import annotations

from typing import BinaryIO, Optional

from .escape import escape_string, escape_string_html
from .numbers import (
    format_float32,
    format_float32_lossy,
    format_float64,
    format_float64_lossy,
    format_int,
    format_uint,
)


class Stream:
    """Collects JSON output in an internal buffer.

    When ``out`` is given, :meth:`write` and :meth:`flush` pass the buffered
    bytes on to it; otherwise the result is taken with :meth:`buffer`.
    A positive ``indention_step`` makes objects and arrays span several
    lines, indented by that many spaces per level.
    """

    def __init__(self, out: Optional[BinaryIO] = None, indention_step: int = 0) -> None:
        self._out = out
        self._buf = bytearray()
        self._indention = 0
        self.indention_step = indention_step
        self.attachment: object = None

    def buffer(self) -> bytes:
        """Return the bytes that are buffered and not yet passed on."""
        return bytes(self._buf)

    def buffered(self) -> int:
        """Return the number of bytes in the buffer."""
        return len(self._buf)

    def set_buffer(self, buf: bytes) -> None:
        """Replace the buffer's contents with ``buf``."""
        self._buf = bytearray(buf)

    def reset(self, out: Optional[BinaryIO]) -> None:
        """Clear the buffer and direct further output to ``out``."""
        self._out = out
        self._buf.clear()

    def write(self, data: bytes) -> int:
        """Append ``data``; with an output attached, pass the buffer on.

        Returns the number of bytes the output took, or ``len(data)`` when
        there is no output.
        """
        self._buf += data
        if self._out is None:
            return len(data)
        written = self._out.write(bytes(self._buf))
        if written is None:
            written = len(self._buf)
        del self._buf[:written]
        return written

    def flush(self) -> None:
        """Write the buffer to the output and empty it."""
        if self._out is None:
            return
        self._out.write(bytes(self._buf))
        self._buf.clear()

    def _append(self, text: str) -> None:
        self._buf += text.encode("utf-8", "surrogatepass")

    def write_raw(self, s: str) -> None:
        """Append ``s`` as it is, without quoting."""
        self._append(s)

    def write_nil(self) -> None:
        self._buf += b"null"

    def write_true(self) -> None:
        self._buf += b"true"

    def write_false(self) -> None:
        self._buf += b"false"

    def write_bool(self, val: bool) -> None:
        if val:
            self.write_true()
        else:
            self.write_false()

    def _write_indention(self, delta: int) -> None:
        if self._indention == 0:
            return
        self._buf += b"\n" + b" " * max(self._indention - delta, 0)

    def write_object_start(self) -> None:
        self._indention += self.indention_step
        self._buf += b"{"
        self._write_indention(0)

    def write_object_field(self, field: str) -> None:
        self.write_string(field)
        self._buf += b": " if self._indention > 0 else b":"

    def write_object_end(self) -> None:
        self._write_indention(self.indention_step)
        self._indention -= self.indention_step
        self._buf += b"}"

    def write_empty_object(self) -> None:
        self._buf += b"{}"

    def write_more(self) -> None:
        self._buf += b","
        self._write_indention(0)

    def write_array_start(self) -> None:
        self._indention += self.indention_step
        self._buf += b"["
        self._write_indention(0)

    def write_empty_array(self) -> None:
        self._buf += b"[]"

    def write_array_end(self) -> None:
        self._write_indention(self.indention_step)
        self._indention -= self.indention_step
        self._buf += b"]"

    def write_int8(self, val: int) -> None:
        self._append(format_int(val, 8))

    def write_int16(self, val: int) -> None:
        self._append(format_int(val, 16))

    def write_int32(self, val: int) -> None:
        self._append(format_int(val, 32))

    def write_int64(self, val: int) -> None:
        self._append(format_int(val, 64))

    def write_int(self, val: int) -> None:
        self._append(format_int(val, 64))

    def write_uint8(self, val: int) -> None:
        self._append(format_uint(val, 8))

    def write_uint16(self, val: int) -> None:
        self._append(format_uint(val, 16))

    def write_uint32(self, val: int) -> None:
        self._append(format_uint(val, 32))

    def write_uint64(self, val: int) -> None:
        self._append(format_uint(val, 64))

    def write_uint(self, val: int) -> None:
        self._append(format_uint(val, 64))

    def write_float32(self, val: float) -> None:
        self._append(format_float32(val))

    def write_float32_lossy(self, val: float) -> None:
        self._append(format_float32_lossy(val))

    def write_float64(self, val: float) -> None:
        self._append(format_float64(val))

    def write_float64_lossy(self, val: float) -> None:
        self._append(format_float64_lossy(val))

    def write_string(self, s: str) -> None:
        """Append ``s`` as a quoted JSON string."""
        self._append(escape_string(s))

    def write_string_with_html_escaped(self, s: str) -> None:
        """Append ``s`` as a quoted JSON string safe to embed in HTML."""
        self._append(escape_string_html(s))