"""A cursor over a byte buffer with little-endian reads and offset jumps."""

from __future__ import annotations

import struct

_UINT32 = struct.Struct("<I")
_INT32 = struct.Struct("<i")


class BinaryStream:
    """Reads values sequentially from ``data`` starting at ``offset``."""

    def __init__(self, data, offset: int = 0, parent: "BinaryStream | None" = None):
        self.data = data if isinstance(data, bytes) else bytes(data)
        self.offset = offset
        self.parent = parent

    def read(self, size: int) -> bytes:
        """Read ``size`` raw bytes and advance."""
        if size < 0:
            raise ValueError("size must not be negative")
        chunk = self.data[self.offset:self.offset + size]
        if len(chunk) < size:
            raise EOFError(f"wanted {size} bytes at offset {self.offset}, got {len(chunk)}")
        self.offset += size
        return chunk

    def read_uint32(self) -> int:
        return _UINT32.unpack(self.read(_UINT32.size))[0]

    def read_int32(self) -> int:
        return _INT32.unpack(self.read(_INT32.size))[0]

    def read_string(self, maxlen: int = 4096) -> str:
        """Read a NUL-terminated string, keeping at most ``maxlen - 1`` characters."""
        if maxlen < 1:
            raise ValueError("maxlen must be at least 1")
        end = self.data.find(b"\0", self.offset)
        if end == -1:
            raise EOFError(f"unterminated string at offset {self.offset}")
        raw = self.data[self.offset:min(end, self.offset + maxlen - 1)]
        self.offset += len(raw) + 1
        return raw.decode("utf-8")

    def skip(self, amount: int) -> None:
        self.offset += amount

    def goto(self) -> "BinaryStream":
        """Read a 32-bit offset; return a child stream there, or self when it is zero."""
        target = self.read_uint32()
        if target == 0:
            return self
        return BinaryStream(self.data, target, self)

    def close(self) -> "BinaryStream | None":
        """Finish with this stream and hand back the one it was opened from."""
        return self.parent