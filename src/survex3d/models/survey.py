from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from .header import SurvexHeader
from .station import Station
from .leg import Leg
from .common import Bounds


class SurvexData(BaseModel):
    model_config = ConfigDict(frozen=True)

    header: SurvexHeader
    stations: List[Station] = Field(default_factory=list)
    legs: List[Leg] = Field(default_factory=list)
    bounds: Bounds = Field(default_factory=Bounds)

    @classmethod
    def from_binary(cls, data: bytes | str | Path) -> "SurvexData":
        from ..binary.reader import parse_file
        return parse_file(data)

    def station(self, name: str) -> Station | None:
        for st in self.stations:
            if st.name == name:
                return st
        return None

    @property
    def total_length_m(self) -> float:
        """Summed length of centreline legs (splays excluded)."""
        return sum(leg.length_m for leg in self.legs if not leg.is_splay)
