from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

MAGIC = "Survex 3D Image File"


class SurvexHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_id: str = MAGIC
    version: str = "v8"
    title: str = ""
    timestamp: datetime
    flags: int = Field(0, ge=0, le=0xFF)
    separator: str = "."

    @property
    def format_version(self) -> int | None:
        digits = self.version[1:]
        return int(digits) if digits.isdigit() else None
