import pytest

from survex3d.binary.codecs.bytecursor import Cursor
from survex3d.binary.errors import UnexpectedEndOfInput


def test_little_endian_reads():
    data = bytes([0x7F]) + (0xBEEF).to_bytes(2, "little") + (0xDEADBEEF).to_bytes(4, "little") \
        + (-5878 * 100).to_bytes(4, "little", signed=True)
    cur = Cursor(data)
    assert cur.u8() == 0x7F
    assert cur.u16() == 0xBEEF
    assert cur.u32() == 0xDEADBEEF
    assert cur.s32() == -587800
    assert cur.at_end()


def test_underrun_leaves_position():
    cur = Cursor(b"\x01\x02\x03")
    cur.u8()
    with pytest.raises(UnexpectedEndOfInput) as ei:
        cur.u32()
    assert ei.value.offset == 1
    assert cur.tell() == 1
    assert cur.remaining() == 2


def test_read_delimited_newline():
    cur = Cursor(b"abc\ndef\n")
    assert cur.read_delimited(0x0A) == "abc"
    assert cur.read_delimited(0x0A) == "def"
    assert cur.at_end()


def test_read_delimited_missing_newline_is_underrun():
    cur = Cursor(b"no newline here")
    with pytest.raises(UnexpectedEndOfInput):
        cur.read_delimited(0x0A)


def test_read_delimited_nul_runs_to_end():
    cur = Cursor(b"tail text")
    assert cur.read_delimited(0) == "tail text"
    assert cur.at_end()


def test_read_delimited_replaces_invalid_utf8():
    cur = Cursor(b"ab\xffcd\n")
    assert cur.read_delimited(0x0A) == "ab\ufffdcd"


def test_cursor_over_memoryview_slice():
    buf = memoryview(b"xxhello\nrest")[2:]
    cur = Cursor(buf)
    assert cur.read_delimited(0x0A) == "hello"
    assert cur.take(4) == b"rest"


def test_read_delimited_searches_from_position():
    cur = Cursor(bytearray(b"a\nbb\x00ccc"))
    assert cur.take(2) == b"a\n"
    assert cur.read_delimited(0) == "bb"
    assert cur.read_delimited(0) == "ccc"
    assert cur.read_delimited(0) == ""
