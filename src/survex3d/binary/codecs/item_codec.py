from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Tuple, Union

from .bytecursor import Cursor
from .label_codec import LabelStack
from survex3d.binary.scale import cm_to_m, days_to_date
from survex3d.models.common import Point3

logger = logging.getLogger(__name__)


class ItemType:
    STYLE_NORMAL = 0x00
    STYLE_DIVING = 0x01
    STYLE_CARTESIAN = 0x02
    STYLE_CYLPOLAR = 0x03
    STYLE_NOSURVEY = 0x04
    MOVE = 0x0F
    DATE_NONE = 0x10
    DATE_DAYS = 0x11
    ERROR_INFO = 0x1F
    XSECT = 0x30
    LINE = 0x40
    LABEL = 0x80

    LINE_NO_LABEL_CHANGE = 0x20
    LINE_FLAGS_MASK = 0x3F
    LABEL_FLAGS_MASK = 0x7F


# ---- decoded items ----

@dataclass(frozen=True)
class MoveItem:
    point: Point3


@dataclass(frozen=True)
class LineItem:
    raw_type: int
    point: Point3
    label: str

    @property
    def flags(self) -> int:
        return self.raw_type & ItemType.LINE_FLAGS_MASK


@dataclass(frozen=True)
class LabelItem:
    raw_type: int
    point: Point3
    name: str

    @property
    def flags(self) -> int:
        return self.raw_type & ItemType.LABEL_FLAGS_MASK


@dataclass(frozen=True)
class StyleItem:
    raw_type: int


@dataclass(frozen=True)
class ReservedItem:
    raw_type: int


@dataclass(frozen=True)
class DateItem:
    raw_type: int
    days: int | None = None

    @property
    def date(self) -> date | None:
        return days_to_date(self.days) if self.days is not None else None


@dataclass(frozen=True)
class ErrorInfoItem:
    raw_type: int
    legs: int
    length_cm: int
    e: int
    h: int
    v: int

    @property
    def length_m(self) -> float:
        return cm_to_m(self.length_cm)


@dataclass(frozen=True)
class CrossSectionItem:
    raw_type: int


@dataclass(frozen=True)
class UnknownItem:
    raw_type: int


Item = Union[
    MoveItem, LineItem, LabelItem, StyleItem, ReservedItem,
    DateItem, ErrorInfoItem, CrossSectionItem, UnknownItem,
]


# ---- payload readers ----

def read_point(cur: Cursor) -> Point3:
    """Three int32 centimetre coordinates."""
    x = cur.s32()
    y = cur.s32()
    z = cur.s32()
    return Point3(x=cm_to_m(x), y=cm_to_m(y), z=cm_to_m(z))


def _style(t: int, cur: Cursor, labels: LabelStack) -> Item:
    return StyleItem(t)

def _reserved(t: int, cur: Cursor, labels: LabelStack) -> Item:
    return ReservedItem(t)

def _move(t: int, cur: Cursor, labels: LabelStack) -> Item:
    return MoveItem(read_point(cur))

def _date(t: int, cur: Cursor, labels: LabelStack) -> Item:
    if t == ItemType.DATE_DAYS:
        return DateItem(t, cur.u16())
    return DateItem(t)

def _error_info(t: int, cur: Cursor, labels: LabelStack) -> Item:
    legs, length, e, h, v = (cur.s32() for _ in range(5))
    return ErrorInfoItem(t, legs, length, e, h, v)

def _xsect(t: int, cur: Cursor, labels: LabelStack) -> Item:
    return CrossSectionItem(t)

def _line(t: int, cur: Cursor, labels: LabelStack) -> Item:
    if t & ItemType.LINE_NO_LABEL_CHANGE:
        label = labels.value
    else:
        label = labels.decode(cur)
    return LineItem(t, read_point(cur), label)

def _label(t: int, cur: Cursor, labels: LabelStack) -> Item:
    name = labels.decode(cur)
    return LabelItem(t, read_point(cur), name)


@dataclass(frozen=True)
class ItemRange:
    name: str
    lo: int
    hi: int  # inclusive
    read: Callable[[int, Cursor, LabelStack], Item]


# Checked top to bottom; the first range containing the type byte wins.
ITEM_PLAN: Tuple[ItemRange, ...] = (
    ItemRange("style",     0x00, 0x04, _style),
    ItemRange("reserved",  0x05, 0x0E, _reserved),
    ItemRange("move",      0x0F, 0x0F, _move),
    ItemRange("date",      0x10, 0x13, _date),
    ItemRange("error",     0x1F, 0x1F, _error_info),
    ItemRange("xsect",     0x30, 0x33, _xsect),
    ItemRange("line",      0x40, 0x7F, _line),
    ItemRange("label",     0x80, 0xFF, _label),
)


def _lookup(t: int) -> ItemRange | None:
    for rng in ITEM_PLAN:
        if rng.lo <= t <= rng.hi:
            return rng
    return None


def decode_item(cur: Cursor, labels: LabelStack) -> Item:
    """
    Read one type byte and its payload. Raises UnexpectedEndOfInput if the
    record is cut short; the label stack may then be partially updated.
    """
    start = cur.tell()
    t = cur.u8()
    rng = _lookup(t)
    if rng is None:
        logger.warning("unknown item type 0x%02x at %d, skipping", t, start)
        return UnknownItem(t)
    item = rng.read(t, cur, labels)
    logger.debug("item %s 0x%02x at %d: %s", rng.name, t, start, item)
    return item
