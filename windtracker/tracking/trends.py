# ABOUTME: Pure trend derivations over station readings and history
# ABOUTME: Slope, building detection and upstream-to-downstream ETA estimate

from typing import Optional, Sequence

from windtracker.conversions import clamp, round_half_up
from windtracker.weather.models import HistoricPoint, WindReading

DEFAULT_LOOKBACK = 6            # samples, ~30 min at 5 min spacing
BUILDING_SLOPE_THRESHOLD = 0.08  # m/s per sample
BUILDING_MIN_SPEED = 4.0        # m/s
ETA_MIN_SPEED = 0.5             # m/s
DEFAULT_DISTANCE_KM = 25.0

# Front speed ~ baseline + factor * wind, bounded
FRONT_BASE_KMH = 10.0
FRONT_FACTOR = 1.5
FRONT_MIN_KMH = 8.0
FRONT_MAX_KMH = 45.0


def slope(points: Sequence[HistoricPoint], lookback: int = DEFAULT_LOOKBACK) -> float:
    """
    Rate of change of speed over the last `lookback` samples.

    Returns:
        m/s per sample, or 0 when fewer than `lookback` points exist
    """
    if not points or len(points) < lookback:
        return 0.0
    tail = points[-lookback:]
    return (tail[-1].speed - tail[0].speed) / lookback


def is_building(
    reading: Optional[WindReading],
    points: Sequence[HistoricPoint],
    lookback: int = DEFAULT_LOOKBACK,
) -> bool:
    """
    Wind is building when the recent slope is above threshold and the
    current speed is at least BUILDING_MIN_SPEED. Same rule for every station.
    """
    if reading is None:
        return False
    return (
        slope(points, lookback) > BUILDING_SLOPE_THRESHOLD
        and reading.wind.speed >= BUILDING_MIN_SPEED
    )


def front_speed_kmh(wind_speed: float) -> float:
    return clamp(FRONT_BASE_KMH + wind_speed * FRONT_FACTOR, FRONT_MIN_KMH, FRONT_MAX_KMH)


def eta_minutes(
    upstream: Optional[WindReading],
    building: bool,
    distance_km: float = DEFAULT_DISTANCE_KM,
) -> Optional[int]:
    """
    Estimate minutes until upstream wind reaches the downstream station.

    Returns:
        Whole minutes, or None unless upstream is building above ETA_MIN_SPEED
    """
    speed = upstream.wind.speed if upstream is not None else 0.0
    if not building or speed <= ETA_MIN_SPEED:
        return None
    return round_half_up(distance_km / front_speed_kmh(speed) * 60)


def trend_delta(
    reading: Optional[WindReading],
    points: Sequence[HistoricPoint],
    lookback: int = DEFAULT_LOOKBACK,
) -> Optional[float]:
    """Current speed minus the speed `lookback` samples back, None if unknown."""
    if reading is None or len(points) < lookback:
        return None
    return reading.wind.speed - points[-lookback].speed
