from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from survex3d.binary.codecs.item_codec import Item, LabelItem, LineItem, MoveItem
from survex3d.models.common import Bounds, Point3
from survex3d.models.header import SurvexHeader
from survex3d.models.leg import Leg
from survex3d.models.station import Station
from survex3d.models.survey import SurvexData

logger = logging.getLogger(__name__)

MATCH_EPSILON_M = 0.001


@dataclass
class _LegDraft:
    from_station: str
    start: Point3
    end: Point3
    flags: int
    to_station: str = ""

    def freeze(self) -> Leg:
        return Leg(
            from_station=self.from_station,
            to_station=self.to_station,
            start=self.start,
            end=self.end,
            flags=self.flags,
        )


class SurveyGraphBuilder:
    """
    Turns the decoded item stream into stations and legs.

    A LINE is emitted before its end is necessarily named, so the most recent
    leg stays pending until a LABEL lands on its end point (within
    `match_epsilon` metres per axis) and fills in `to_station`. Legs are
    drafted here and only become `Leg` models in finish(), so feeding more
    items never alters a result already returned.
    """

    def __init__(self, *, match_epsilon: float = MATCH_EPSILON_M):
        self.match_epsilon = match_epsilon
        self.current_point = Point3()
        self.last_station_label: Optional[str] = None
        self.pending_leg: Optional[_LegDraft] = None
        self.stations: Dict[str, Station] = {}
        self.legs: List[_LegDraft] = []

    def feed(self, item: Item) -> None:
        match item:
            case MoveItem():
                self._move(item)
            case LineItem():
                self._line(item)
            case LabelItem():
                self._label(item)
            case _:
                # styles, dates, error info, cross-sections, unknown
                pass

    def _move(self, item: MoveItem) -> None:
        self.current_point = item.point
        self.last_station_label = None
        self.pending_leg = None

    def _line(self, item: LineItem) -> None:
        leg = _LegDraft(
            from_station=self.last_station_label or "",
            start=self.current_point,
            end=item.point,
            flags=item.flags,
        )
        self.legs.append(leg)
        self.pending_leg = leg
        self.current_point = item.point
        self.last_station_label = None

    def _label(self, item: LabelItem) -> None:
        if not item.name:
            logger.debug("ignoring label with empty name at %s", item.point)
            return
        self.stations[item.name] = Station(name=item.name, position=item.point, flags=item.flags)
        self.last_station_label = item.name
        self.current_point = item.point
        pending = self.pending_leg
        if pending is not None and pending.end.close_to(item.point, self.match_epsilon):
            pending.to_station = item.name
            self.pending_leg = None

    def bounds(self) -> Bounds:
        return Bounds.around(st.position for st in self.stations.values())

    def finish(self, header: SurvexHeader) -> SurvexData:
        return SurvexData(
            header=header,
            stations=list(self.stations.values()),
            legs=[leg.freeze() for leg in self.legs],
            bounds=self.bounds(),
        )
