from __future__ import annotations
import logging

from .bytecursor import Cursor

logger = logging.getLogger(__name__)

# Unpacked counts at or above this are escaped as 0xFF + u32.
_ESCAPE = 0xFF


class LabelStack:
    """
    The current station label, rebuilt from tail edits.

    Each edit drops D bytes from the end of the buffer and appends A new
    bytes read from the stream. The counts are packed in one byte
    (D high nibble, A low nibble) when that byte is non-zero; otherwise a
    zero byte is followed by D then A, each a single byte or 0xFF + u32.
    Counts are in bytes, so a multi-byte UTF-8 name may be split between
    edits and still decode correctly.
    """

    __slots__ = ("_buf",)

    def __init__(self, initial: str = ""):
        self._buf = bytearray(initial.encode("utf-8"))

    @property
    def value(self) -> str:
        return self._buf.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self._buf)

    @staticmethod
    def _read_count(cur: Cursor) -> int:
        b = cur.u8()
        return b if b != _ESCAPE else cur.u32()

    def read_edit(self, cur: Cursor) -> tuple[int, int]:
        """Read the (delete, append) counts of one edit."""
        b0 = cur.u8()
        if b0 != 0:
            return b0 >> 4, b0 & 0x0F
        delete = self._read_count(cur)
        append = self._read_count(cur)
        return delete, append

    def apply(self, delete: int, appended: bytes) -> str:
        if delete >= len(self._buf):
            self._buf.clear()
        elif delete > 0:
            del self._buf[-delete:]
        self._buf += appended
        return self.value

    def decode(self, cur: Cursor) -> str:
        """Consume one edit from `cur` and return the updated label."""
        delete, append = self.read_edit(cur)
        appended = cur.take(append)
        label = self.apply(delete, appended)
        logger.debug("label edit: delete=%d append=%d -> %r", delete, append, label)
        return label


def _encode_count(n: int) -> bytes:
    if n < _ESCAPE:
        return bytes([n])
    return bytes([_ESCAPE]) + n.to_bytes(4, "little")


def encode_label_edit(previous: str, label: str) -> bytes:
    """
    Minimal edit turning `previous` into `label`: keep the common byte
    prefix, delete the rest of `previous`, append the rest of `label`.
    """
    old = previous.encode("utf-8")
    new = label.encode("utf-8")
    common = 0
    for a, b in zip(old, new):
        if a != b:
            break
        common += 1
    delete = len(old) - common
    tail = new[common:]
    if delete <= 15 and len(tail) <= 15 and (delete or tail):
        return bytes([(delete << 4) | len(tail)]) + tail
    return b"\x00" + _encode_count(delete) + _encode_count(len(tail)) + tail
