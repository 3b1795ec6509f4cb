from __future__ import annotations
from datetime import datetime, timezone
from typing import Iterable

from .codecs.header_codec import encode_header
from .codecs.item_codec import (
    CrossSectionItem, DateItem, ErrorInfoItem, Item, ItemType, LabelItem,
    LineItem, MoveItem, ReservedItem, StyleItem, UnknownItem,
)
from .codecs.label_codec import encode_label_edit
from .scale import m_to_cm
from survex3d.models.common import LegFlag, Point3, StationFlag
from survex3d.models.header import SurvexHeader


def _point(p: Point3) -> bytes:
    out = bytearray()
    for v in (p.x, p.y, p.z):
        out += m_to_cm(v).to_bytes(4, "little", signed=True)
    return bytes(out)


def write_file(header: SurvexHeader, items: Iterable[Item]) -> bytes:
    """
    Encode a header and item sequence. LINE items whose label equals the
    running label get the no-change bit and no edit; others get a minimal
    tail edit.
    """
    out = bytearray(encode_header(header))
    label = ""
    for item in items:
        if isinstance(item, MoveItem):
            out.append(ItemType.MOVE)
            out += _point(item.point)
        elif isinstance(item, LineItem):
            t = item.raw_type & ~ItemType.LINE_NO_LABEL_CHANGE & 0xFF
            if item.label == label:
                out.append(t | ItemType.LINE_NO_LABEL_CHANGE)
            else:
                out.append(t)
                out += encode_label_edit(label, item.label)
                label = item.label
            out += _point(item.point)
        elif isinstance(item, LabelItem):
            out.append(item.raw_type)
            out += encode_label_edit(label, item.name)
            label = item.name
            out += _point(item.point)
        elif isinstance(item, DateItem):
            out.append(item.raw_type)
            if item.raw_type == ItemType.DATE_DAYS:
                out += (item.days or 0).to_bytes(2, "little")
        elif isinstance(item, ErrorInfoItem):
            out.append(ItemType.ERROR_INFO)
            for v in (item.legs, item.length_cm, item.e, item.h, item.v):
                out += v.to_bytes(4, "little", signed=True)
        elif isinstance(item, (StyleItem, ReservedItem, CrossSectionItem, UnknownItem)):
            out.append(item.raw_type)
        else:
            raise TypeError(f"cannot encode {item!r}")
    return bytes(out)


def build_demo_survey() -> bytes:
    """A small survey: an entrance series, a splay and a side passage."""
    p0 = Point3(x=0.0, y=0.0, z=0.0)
    p1 = Point3(x=5.25, y=1.5, z=-1.0)
    p2 = Point3(x=9.8, y=4.1, z=-3.35)
    p3 = Point3(x=10.6, y=5.0, z=-3.0)
    p4 = Point3(x=12.0, y=-2.4, z=-6.1)
    p5 = Point3(x=18.02, y=-5.78, z=-7.47)

    ent = int(StationFlag.UNDERGROUND | StationFlag.ENTRANCE | StationFlag.SURFACE)
    und = int(StationFlag.UNDERGROUND)
    header = SurvexHeader(
        title="Demo cave",
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    items = [
        StyleItem(ItemType.STYLE_NORMAL),
        DateItem(ItemType.DATE_DAYS, 45290),
        MoveItem(p0),
        LabelItem(ItemType.LABEL | ent, p0, "demo.entrance.0"),
        LineItem(ItemType.LINE, p1, "demo.entrance.0"),
        LabelItem(ItemType.LABEL | und, p1, "demo.entrance.1"),
        LineItem(ItemType.LINE, p2, "demo.entrance.1"),
        LabelItem(ItemType.LABEL | und, p2, "demo.entrance.2"),
        LineItem(ItemType.LINE | int(LegFlag.SPLAY), p3, "demo.entrance.2"),
        MoveItem(p2),
        LineItem(ItemType.LINE, p4, "demo.entrance.2"),
        LabelItem(ItemType.LABEL | und, p4, "demo.the_long_side_passage.1"),
        LineItem(ItemType.LINE, p5, "demo.the_long_side_passage.1"),
        LabelItem(ItemType.LABEL | und, p5, "demo.the_long_side_passage.2"),
        ErrorInfoItem(ItemType.ERROR_INFO, legs=4, length_cm=2412, e=0, h=0, v=0),
    ]
    return write_file(header, items)
