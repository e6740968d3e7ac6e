# ABOUTME: Immutable snapshot of the tracker's per-station data
# ABOUTME: Replaced wholesale each poll cycle so readers never see a half-updated station

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from windtracker.weather.models import HistoricPoint, WindReading


@dataclass(frozen=True)
class StationData:
    """Current reading and history for one station, resolved in the same cycle"""
    current: WindReading
    historic: tuple[HistoricPoint, ...]
    source: str = "simulated"    # "api" or "simulated", for the current reading


@dataclass(frozen=True)
class TrackerState:
    """
    Snapshot of all stations.

    The tracker builds a new TrackerState per cycle and swaps it in with a
    single assignment; nothing mutates a published snapshot.
    """
    stations: Mapping[int, StationData] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(cls, stations: dict[int, StationData]) -> "TrackerState":
        return cls(stations=MappingProxyType(dict(stations)))

    def get(self, station_id: int) -> Optional[StationData]:
        return self.stations.get(station_id)

    def current(self, station_id: int) -> Optional[WindReading]:
        data = self.stations.get(station_id)
        return data.current if data else None

    def historic(self, station_id: int) -> tuple[HistoricPoint, ...]:
        data = self.stations.get(station_id)
        return data.historic if data else ()

    @property
    def is_empty(self) -> bool:
        return not self.stations
