from datetime import datetime, timezone

import pytest

from survex3d.binary.codecs.bytecursor import Cursor
from survex3d.binary.codecs.header_codec import decode_header, encode_header
from survex3d.binary.errors import InvalidFormat
from survex3d.models.header import SurvexHeader


def test_header_fields():
    data = b"Survex 3D Image File\nv8\nMy Title\n@1700000000\n\x00\x0f"
    cur = Cursor(data)
    hdr = decode_header(cur)
    assert hdr.title == "My Title"
    assert hdr.version == "v8"
    assert hdr.format_version == 8
    assert hdr.timestamp == datetime.fromtimestamp(1700000000, tz=timezone.utc)
    assert hdr.flags == 0
    assert hdr.separator == "."
    # cursor lands on the first item byte
    assert cur.u8() == 0x0F


def test_empty_title_allowed():
    hdr = decode_header(Cursor(b"Survex 3D Image File\nv8\n\n@0\n\x02"))
    assert hdr.title == ""
    assert hdr.flags == 2


def test_bad_timestamp_falls_back_to_now():
    before = datetime.now(tz=timezone.utc)
    hdr = decode_header(Cursor(b"Survex 3D Image File\nv8\nT\n2024-01-01\n\x00"))
    assert hdr.timestamp >= before


def test_non_numeric_at_timestamp_falls_back():
    hdr = decode_header(Cursor(b"Survex 3D Image File\nv8\nT\n@soon\n\x00"))
    assert hdr.timestamp.tzinfo is not None


@pytest.mark.parametrize("data", [
    b"Not a survex file\nv8\nT\n@0\n\x00",
    b"Survex 3D Image File\n8\nT\n@0\n\x00",
])
def test_bad_magic_or_version_is_fatal(data):
    with pytest.raises(InvalidFormat):
        decode_header(Cursor(data))


@pytest.mark.parametrize("data", [b"", b"Survex 3D Image File\nv8\nT\n@0\n"])
def test_truncated_header_is_invalid_format(data):
    with pytest.raises(InvalidFormat):
        decode_header(Cursor(data))


def test_encode_header_layout():
    hdr = SurvexHeader(title="Cave", timestamp=datetime.fromtimestamp(1700000000, tz=timezone.utc), flags=1)
    assert encode_header(hdr) == b"Survex 3D Image File\nv8\nCave\n@1700000000\n\x01"


def test_bad_timestamp_only_varies_timestamp():
    data = b"Survex 3D Image File\nv8\nT\nyesterday\n\x05"
    a = decode_header(Cursor(data)).model_dump(exclude={"timestamp"})
    b = decode_header(Cursor(data)).model_dump(exclude={"timestamp"})
    assert a == b == {
        "file_id": "Survex 3D Image File", "version": "v8", "title": "T",
        "flags": 5, "separator": ".",
    }
