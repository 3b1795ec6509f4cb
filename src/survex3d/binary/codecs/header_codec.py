from __future__ import annotations
import logging
from datetime import datetime, timezone

from .bytecursor import Cursor
from survex3d.binary.errors import InvalidFormat, UnexpectedEndOfInput
from survex3d.models.header import MAGIC, SurvexHeader

logger = logging.getLogger(__name__)


def _parse_timestamp(token: str) -> datetime:
    """
    "@<unix seconds>" in UTC. Anything else decodes as the current time, so
    a file with an unreadable timestamp does not give identical headers on
    two parses; every other field of the result still does.
    """
    if token.startswith("@"):
        try:
            return datetime.fromtimestamp(int(token[1:], 10), tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            pass
    logger.warning("unreadable timestamp %r, using current time", token)
    return datetime.now(tz=timezone.utc)


def decode_header(cur: Cursor) -> SurvexHeader:
    """
    Parse the text prologue: magic, version, title, timestamp (one line each),
    then the file-wide flags byte. Leaves the cursor at the first item.
    """
    try:
        file_id = cur.read_delimited(0x0A)
        if not file_id.startswith(MAGIC):
            raise InvalidFormat(f"bad magic {file_id[:32]!r}")
        version = cur.read_delimited(0x0A)
        if not version.startswith("v"):
            raise InvalidFormat(f"bad version {version!r}")
        title = cur.read_delimited(0x0A)
        timestamp = _parse_timestamp(cur.read_delimited(0x0A))
        flags = cur.u8()
    except UnexpectedEndOfInput as e:
        raise InvalidFormat(f"truncated header: {e}") from e

    logger.debug("header: version=%s title=%r flags=0x%02x end=%d", version, title, flags, cur.tell())
    return SurvexHeader(
        file_id=file_id,
        version=version,
        title=title,
        timestamp=timestamp,
        flags=flags,
    )


def encode_header(hdr: SurvexHeader) -> bytes:
    out = bytearray()
    out += hdr.file_id.encode("utf-8") + b"\n"
    out += hdr.version.encode("utf-8") + b"\n"
    out += hdr.title.encode("utf-8") + b"\n"
    out += f"@{int(hdr.timestamp.timestamp())}".encode("ascii") + b"\n"
    out += hdr.flags.to_bytes(1, "little")
    return bytes(out)
