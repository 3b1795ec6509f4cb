from datetime import datetime, timezone

from survex3d.binary.codecs.item_codec import LabelItem, LineItem, MoveItem
from survex3d.binary.reader import iter_items
from survex3d.binary.writer import write_file
from survex3d.models.common import Point3
from survex3d.models.header import SurvexHeader

HDR = SurvexHeader(title="W", timestamp=datetime.fromtimestamp(0, tz=timezone.utc))


def test_line_with_unchanged_label_sets_flag_and_skips_edit():
    data = write_file(HDR, [
        LabelItem(0x80, Point3(), "cave.1"),
        LineItem(0x40, Point3(x=1.0), "cave.1"),
    ])
    body = data[len(b"Survex 3D Image File\nv8\nW\n@0\n\x00"):]
    # label: type, packed edit (0 delete, 6 append), name, 12 coordinate bytes
    assert body[:2] == bytes([0x80, 0x06])
    line = body[2 + 6 + 12:]
    assert line[0] == 0x60
    assert len(line) == 1 + 12


def test_long_names_use_unpacked_edits():
    long_name = "system.branch_with_a_long_name.17"
    data = write_file(HDR, [
        MoveItem(Point3()),
        LabelItem(0x82, Point3(x=-2.5, y=3.01, z=0.0), long_name),
    ])
    items = [item for _, item in iter_items(data)]
    assert items[1].name == long_name
    assert items[1].point == Point3(x=-2.5, y=3.01, z=0.0)
    assert items[1].flags == 0x02
