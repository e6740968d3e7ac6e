# ABOUTME: Random-walk simulator for station readings and history
# ABOUTME: Used in simulation-only mode and as the fallback when the wind API fails

import random
from datetime import datetime, timedelta
from typing import Optional

from windtracker.conversions import clamp
from windtracker.weather.models import HistoricPoint, Wind, WindReading
from windtracker.weather.stations import Station

MAX_SPEED = 20.0
MAX_HISTORIC_SPEED = 22.0
HISTORIC_STEP_MINUTES = 5


def _now() -> datetime:
    return datetime.now().astimezone()


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="seconds")


def simulate_current(
    station: Station,
    previous: Optional[WindReading] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> WindReading:
    """
    Produce the next synthetic reading for a station.

    Drifts from the previous reading's speed, or from the station's base
    speed plus noise when there is none. The result always satisfies
    gust >= speed >= min >= 0.

    Args:
        station: Catalog station whose profile drives the walk
        previous: Last reading for this station, if any
        rng: Random source (defaults to the module-level generator)
        now: Timestamp to stamp the reading with

    Returns:
        WindReading stamped with an ISO-8601 timestamp
    """
    rng = rng or random
    profile = station.profile

    drift = rng.uniform(*profile.drift_range)
    if previous is not None:
        prev_speed = previous.wind.speed
    else:
        prev_speed = profile.base_speed + rng.uniform(-1, 1)

    speed = clamp(prev_speed + drift, 0, MAX_SPEED)
    gust = clamp(speed + rng.uniform(0.2, 2.5), speed, speed + 4)
    lull = clamp(speed - rng.uniform(0.1, 1), 0, speed)
    jitter = profile.direction_jitter
    direction = profile.base_direction + rng.uniform(-jitter, jitter)

    return WindReading(
        station_id=station.id,
        station_name=station.name,
        date_time=_iso(now or _now()),
        wind=Wind(speed=speed, gust=gust, min=lull, direction=direction, unit="m/s"),
        humidity=60 + rng.uniform(-15, 15),
        pressure=1015 + rng.uniform(-8, 8),
        rain=rng.uniform(0, 0.2),
        temperature=12 + rng.uniform(-2, 8),
    )


def simulate_historic(
    current: WindReading,
    minutes: int = 180,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> list[HistoricPoint]:
    """
    Build a plausible history ending now, one point every 5 minutes.

    Walks from the current speed/gust with small random steps. Returns
    minutes // 5 + 1 points ordered oldest to newest.
    """
    rng = rng or random
    now = now or _now()
    speed = current.wind.speed
    gust = current.wind.gust

    points = []
    for offset in range(minutes, -1, -HISTORIC_STEP_MINUTES):
        speed = clamp(speed + rng.uniform(-0.5, 0.6), 0, MAX_HISTORIC_SPEED)
        gust = clamp(max(gust, speed) + rng.uniform(-0.4, 0.9), speed, speed + 5)
        points.append(HistoricPoint(
            t=_iso(now - timedelta(minutes=offset)),
            speed=round(speed, 2),
            gust=round(gust, 2),
        ))
    return points
