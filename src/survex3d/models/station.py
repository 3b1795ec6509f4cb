from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from .common import Point3, StationFlag


class Station(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    position: Point3
    flags: int = Field(0, ge=0)

    @property
    def flag_set(self) -> StationFlag:
        return StationFlag(self.flags & 0x7F)

    @property
    def is_entrance(self) -> bool:
        return bool(self.flags & StationFlag.ENTRANCE)
