from __future__ import annotations
import struct

from survex3d.binary.errors import UnexpectedEndOfInput


class Cursor:
    __slots__ = ("buf", "pos", "_raw")

    def __init__(self, data: bytes | bytearray | memoryview):
        # bytes(...) is a no-op for bytes input
        self._raw = bytes(data)
        self.buf = memoryview(self._raw)
        self.pos = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos
    def at_end(self) -> bool: return self.pos >= len(self.buf)

    def seek(self, pos: int) -> None:
        if not (0 <= pos <= len(self.buf)): raise ValueError("seek out of bounds")
        self.pos = pos

    def take(self, n: int) -> bytes:
        end = self.pos + n
        if n < 0 or end > len(self.buf):
            raise UnexpectedEndOfInput(self.pos, n, self.remaining())
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out

    def peek(self, n: int) -> bytes:
        end = self.pos + n
        if end > len(self.buf):
            raise UnexpectedEndOfInput(self.pos, n, self.remaining())
        return self.buf[self.pos:end].tobytes()

    # byte-aligned little-endian reads
    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.take(n))[0]
    def u8(self) -> int:  return self._unpack("<B", 1)
    def u16(self) -> int: return self._unpack("<H", 2)
    def s16(self) -> int: return self._unpack("<h", 2)
    def u32(self) -> int: return self._unpack("<I", 4)
    def s32(self) -> int: return self._unpack("<i", 4)

    def read_delimited(self, delimiter: int = 0x0A) -> str:
        """
        Read up to `delimiter` and step past it. The span is decoded as UTF-8
        with replacement characters for invalid sequences.
        A NUL delimiter may be missing (string runs to end of buffer); any
        other missing delimiter is an underrun.
        """
        start = self.pos
        end = self._raw.find(bytes([delimiter]), start)
        if end < 0:
            if delimiter != 0:
                raise UnexpectedEndOfInput(start, self.remaining() + 1, self.remaining())
            end = len(self._raw)
            self.pos = end
        else:
            self.pos = end + 1
        return self._raw[start:end].decode("utf-8", errors="replace")
