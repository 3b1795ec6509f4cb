from __future__ import annotations
from enum import IntFlag
from pydantic import BaseModel, ConfigDict


class StationFlag(IntFlag):
    SURFACE = 0x01
    UNDERGROUND = 0x02
    ENTRANCE = 0x04
    EXPORTED = 0x08
    FIXED = 0x10
    ANON = 0x20
    WALL = 0x40


class LegFlag(IntFlag):
    SURFACE = 0x01
    DUPLICATE = 0x02
    SPLAY = 0x04
    NO_LABEL_CHANGE = 0x20


class Point3(BaseModel):
    """Position in metres."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def close_to(self, other: "Point3", eps: float) -> bool:
        return (
            abs(self.x - other.x) < eps
            and abs(self.y - other.y) < eps
            and abs(self.z - other.z) < eps
        )


class Bounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0

    @classmethod
    def around(cls, points) -> "Bounds":
        pts = list(points)
        if not pts:
            return cls()
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        zs = [p.z for p in pts]
        return cls(
            min_x=min(xs), max_x=max(xs),
            min_y=min(ys), max_y=max(ys),
            min_z=min(zs), max_z=max(zs),
        )
