from __future__ import annotations
import base64
import binascii
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from .binary.errors import SurvexError
from .binary.reader import parse_file
from .models.survey import SurvexData

logger = logging.getLogger(__name__)


class FileLoadResult(BaseModel):
    success: bool
    data: Optional[SurvexData] = None
    file_name: Optional[str] = None
    file_path: Optional[str] = None
    file_size: Optional[int] = None
    error: Optional[str] = None


def load_survex_file(
    source: Union[str, Path, bytes, bytearray],
    *,
    file_name: str | None = None,
    base64_encoded: bool = False,
) -> FileLoadResult:
    """
    Read, optionally unwrap base64 transport encoding, and parse a 3D file.
    Never raises for bad input; failures are reported in the result.
    """
    file_path: str | None = None
    try:
        if isinstance(source, (bytes, bytearray)):
            raw = bytes(source)
        else:
            path = Path(source)
            file_path = str(path)
            file_name = file_name or path.name
            raw = path.read_bytes()
        if base64_encoded:
            raw = base64.b64decode(b"".join(raw.split()), validate=True)
    except (OSError, binascii.Error) as e:
        logger.error("loading %s failed: %s", file_name or "<bytes>", e)
        return FileLoadResult(success=False, file_name=file_name, file_path=file_path, error=str(e))

    logger.info("read %s, %d bytes", file_name or "<bytes>", len(raw))
    try:
        data = parse_file(raw)
    except SurvexError as e:
        logger.error("parsing %s failed: %s", file_name or "<bytes>", e)
        return FileLoadResult(
            success=False, file_name=file_name, file_path=file_path,
            file_size=len(raw), error=str(e),
        )
    return FileLoadResult(
        success=True, data=data, file_name=file_name,
        file_path=file_path, file_size=len(raw),
    )
