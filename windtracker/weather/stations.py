# ABOUTME: Fixed catalog of the two tracked wind stations
# ABOUTME: Each station carries its own simulation profile so the simulator never branches on identity

from dataclasses import dataclass
from typing import Literal

StationRole = Literal["upstream", "downstream"]


@dataclass(frozen=True)
class SimulationProfile:
    """Per-station tuning for synthetic readings"""
    base_speed: float                   # m/s, used when there is no previous reading
    drift_range: tuple[float, float]    # m/s change per simulated reading
    base_direction: float               # degrees
    direction_jitter: float             # +/- degrees around base_direction


@dataclass(frozen=True)
class Station:
    """A fixed wind measurement point"""
    key: str
    id: int
    name: str
    role: StationRole
    profile: SimulationProfile


DROBAK = Station(
    key="drobak",
    id=101,
    name="Drøbak",
    role="upstream",
    profile=SimulationProfile(
        base_speed=5.0,
        drift_range=(-0.3, 0.9),
        base_direction=190.0,
        direction_jitter=20.0,
    ),
)

LYSAKER = Station(
    key="lysaker",
    id=201,
    name="Lysaker",
    role="downstream",
    profile=SimulationProfile(
        base_speed=3.0,
        drift_range=(-0.4, 0.6),
        base_direction=200.0,
        direction_jitter=25.0,
    ),
)

# Polling order: upstream first
STATIONS: tuple[Station, ...] = (DROBAK, LYSAKER)

UPSTREAM = DROBAK
DOWNSTREAM = LYSAKER
