from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field
from .common import Point3, LegFlag


class Leg(BaseModel):
    """Straight survey segment. Station names are empty for unlabelled ends."""

    from_station: str = ""
    to_station: str = ""
    start: Point3 = Field(alias="from")
    end: Point3 = Field(alias="to")
    flags: int = Field(0, ge=0)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def flag_set(self) -> LegFlag:
        return LegFlag(self.flags & 0x3F)

    @property
    def is_splay(self) -> bool:
        return bool(self.flags & LegFlag.SPLAY) or not (self.from_station and self.to_station)

    @property
    def length_m(self) -> float:
        return math.dist(
            (self.start.x, self.start.y, self.start.z),
            (self.end.x, self.end.y, self.end.z),
        )
