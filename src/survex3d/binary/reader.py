from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Tuple, Union

from .codecs.bytecursor import Cursor
from .codecs.header_codec import decode_header
from .codecs.item_codec import Item, LabelItem, LineItem, decode_item
from .codecs.label_codec import LabelStack
from .errors import UnexpectedEndOfInput
from .graph_builder import MATCH_EPSILON_M, SurveyGraphBuilder

from survex3d.models.header import SurvexHeader
from survex3d.models.survey import SurvexData

logger = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def _iter_body(cur: Cursor, labels: LabelStack) -> Iterator[Tuple[int, Item]]:
    """Decode items until the buffer runs out. A cut-off record ends the stream."""
    while not cur.at_end():
        start = cur.tell()
        try:
            item = decode_item(cur, labels)
        except UnexpectedEndOfInput as e:
            logger.warning("item at offset %d truncated (%s); stopping", start, e)
            return
        yield start, item


# -----------------------------
# Full parse
# -----------------------------

class SurvexParser:
    """
    One parse of one buffer. Every call to parse() starts from a fresh cursor,
    label stack and builder, so repeated or concurrent parses share nothing.
    """

    def __init__(self, data: BytesLike, *, match_epsilon: float = MATCH_EPSILON_M):
        self.data = _load_bytes(data)
        self.match_epsilon = match_epsilon

    def parse(self) -> SurvexData:
        logger.info("survex parse started, %d bytes", len(self.data))
        cur = Cursor(self.data)
        header = decode_header(cur)
        labels = LabelStack()
        builder = SurveyGraphBuilder(match_epsilon=self.match_epsilon)

        for _, item in _iter_body(cur, labels):
            builder.feed(item)

        result = builder.finish(header)
        logger.info(
            "survex parse complete: %d stations, %d legs",
            len(result.stations), len(result.legs),
        )
        return result


def parse_file(data: BytesLike, *, match_epsilon: float = MATCH_EPSILON_M) -> SurvexData:
    """Full parse of a Survex 3D image into stations, legs and bounds."""
    return SurvexParser(data, match_epsilon=match_epsilon).parse()


def read_header(data: BytesLike) -> SurvexHeader:
    return decode_header(Cursor(_load_bytes(data)))


# -----------------------------
# Streaming
# -----------------------------

def iter_items(data: BytesLike) -> Iterator[Tuple[int, Item]]:
    """
    Stream (offset, item) pairs following the header. Labels are already
    resolved against the running label stack.
    """
    cur = Cursor(_load_bytes(data))
    decode_header(cur)
    yield from _iter_body(cur, LabelStack())


def summarize_file(data: BytesLike) -> Tuple[int, int]:
    """
    Returns (label_items, line_items) without building the graph. Label items
    count every naming record, so a station relabelled twice counts twice.
    """
    labels = 0
    lines = 0
    for _, item in iter_items(data):
        if isinstance(item, LabelItem):
            labels += 1
        elif isinstance(item, LineItem):
            lines += 1
    return labels, lines
