# ABOUTME: Console entry point that polls both stations and logs a wind report
# ABOUTME: Owns the alert throttle and raises "wind building" notices with the ETA

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Optional

from windtracker.config import Config
from windtracker.scoring.gear import gear_table
from windtracker.tracking.alerts import AlertThrottle
from windtracker.tracking.tracker import WindTracker
from windtracker.weather.stations import DOWNSTREAM, STATIONS, UPSTREAM, Station

log = logging.getLogger(__name__)


def format_station_line(tracker: WindTracker, station: Station) -> str:
    """One-line summary of a station, e.g. 'Drøbak (ID 101): 6.2 m/s SSW ...'"""
    data = tracker.state.get(station.id)
    if data is None:
        return f"{station.name} (ID {station.id}): no data"

    wind = data.current.wind
    delta = tracker.trend_delta(station)
    trend = f"{delta:+.1f} m/s" if delta is not None else "—"
    status = "Building" if tracker.is_building(station) else "Stable/Calm"
    return (
        f"{station.name} (ID {station.id}): {wind.speed:.1f} {wind.unit} "
        f"{round(wind.direction)}° {data.current.cardinal} "
        f"(gust {wind.gust:.1f}) trend {trend} {status} [{data.source}]"
    )


def format_eta_line(tracker: WindTracker) -> str:
    eta = tracker.eta_minutes()
    if eta is None:
        return f"Waiting for wind to build in {UPSTREAM.name}…"
    return f"ETA {UPSTREAM.name} -> {DOWNSTREAM.name}: ~{eta} min"


def format_gear_lines(tracker: WindTracker, weight_kg: float) -> list[str]:
    """Gear table around the rider, the rider's own row marked with '*'."""
    upstream = tracker.current(UPSTREAM)
    wind = upstream.wind.speed if upstream is not None else None
    rider = tracker.recommend_gear(weight_kg)

    header = f"Gear for {weight_kg:g} kg" + (f" @ {wind:.1f} m/s" if wind is not None else "")
    lines = [f"{header}: {rider.describe()}"]
    if wind is not None:
        for weight, gear in gear_table(wind):
            marker = "*" if weight == weight_kg else " "
            lines.append(f" {marker} {weight:>3} kg: {gear.describe()}")
    return lines


def report_cycle(
    tracker: WindTracker,
    throttle: AlertThrottle,
    weight_kg: float,
    now: Optional[datetime] = None,
) -> bool:
    """
    Log the wind report for the latest snapshot and raise an alert if due.

    Returns:
        True if a "wind building" notice was raised this cycle
    """
    for station in STATIONS:
        log.info(format_station_line(tracker, station))
    log.info(format_eta_line(tracker))
    for line in format_gear_lines(tracker, weight_kg):
        log.info(line)

    eta = tracker.eta_minutes()
    if throttle.check(tracker.is_building(UPSTREAM), eta, now=now):
        log.warning(
            f"Wind building in {UPSTREAM.name}: estimated arrival at "
            f"{DOWNSTREAM.name} in ~{eta} min. Get ready!"
        )
        return True
    return False


async def serve(tracker: WindTracker, throttle: AlertThrottle, weight_kg: float) -> None:
    """Poll until cancelled, reporting after every cycle."""
    tracker.start(on_update=lambda state: report_cycle(tracker, throttle, weight_kg))
    try:
        await asyncio.Event().wait()
    finally:
        await tracker.stop()


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if Config.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tracker = WindTracker()
    throttle = AlertThrottle(cooldown=timedelta(minutes=Config.ALERT_COOLDOWN_MINUTES))

    if tracker.simulation_only:
        log.info("No WIND_API_BASE_URL configured - using simulated data")
    else:
        log.info(f"Using wind API at {tracker.client.base_url}")

    try:
        asyncio.run(serve(tracker, throttle, Config.RIDER_WEIGHT_KG))
    except KeyboardInterrupt:
        log.info("Stopped")


if __name__ == "__main__":
    main()
