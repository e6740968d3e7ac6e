# ABOUTME: Polls both stations, falling back to the simulator on any fetch failure
# ABOUTME: Holds the latest snapshot and exposes slope, building and ETA views over it

import asyncio
import logging
import random
from typing import Callable, Optional

from windtracker.config import Config
from windtracker.debug import debug_log
from windtracker.scoring.gear import GearRecommendation, recommend_gear
from windtracker.tracking import trends
from windtracker.tracking.state import StationData, TrackerState
from windtracker.weather.errors import FetchError
from windtracker.weather.fetcher import WindApiClient
from windtracker.weather.models import HistoricPoint, WindReading
from windtracker.weather.simulator import simulate_current, simulate_historic
from windtracker.weather.stations import STATIONS, UPSTREAM, Station

log = logging.getLogger(__name__)

# Gear is sized for this wind until the upstream station has reported
DEFAULT_GEAR_WIND_MS = 6.0

UpdateCallback = Callable[[TrackerState], None]


class WindTracker:
    """
    Keeps current and historic wind data for the fixed station catalog.

    Each cycle resolves every station (API if configured, simulator
    otherwise or on failure) into a fresh TrackerState and swaps it in with
    one assignment. Derived values are computed from the snapshot on read.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        poll_interval_ms: Optional[int] = None,
        historic_hours: Optional[int] = None,
        distance_km: Optional[float] = None,
        client: Optional[WindApiClient] = None,
        rng: Optional[random.Random] = None,
    ):
        if base_url is None:
            base_url = Config.WIND_API_BASE_URL
        if client is None and base_url:
            client = WindApiClient(base_url, timeout=Config.FETCH_TIMEOUT_SECONDS)

        self.client = client
        self.poll_interval_ms = poll_interval_ms if poll_interval_ms is not None else Config.POLL_INTERVAL_MS
        self.historic_hours = historic_hours if historic_hours is not None else Config.HISTORIC_HOURS
        self.distance_km = distance_km if distance_km is not None else Config.STATION_DISTANCE_KM
        self.rng = rng

        self._state = TrackerState()
        self._task: Optional[asyncio.Task] = None

    @property
    def simulation_only(self) -> bool:
        return self.client is None

    @property
    def state(self) -> TrackerState:
        return self._state

    # ==================== Polling ====================

    def refresh(self) -> TrackerState:
        """Run one poll cycle synchronously and publish the result."""
        self._state = self.collect(self._state)
        return self._state

    def collect(self, previous: TrackerState) -> TrackerState:
        """
        Resolve every station into a new snapshot without publishing it.

        Args:
            previous: Snapshot whose current readings seed the simulator

        Returns:
            New TrackerState covering all catalog stations
        """
        stations = {}
        for station in STATIONS:
            stations[station.id] = self._resolve_station(station, previous.current(station.id))
        debug_log(
            ", ".join(f"{s.name}={stations[s.id].current.wind.speed:.1f}" for s in STATIONS),
            "TRACKER",
        )
        return TrackerState.build(stations)

    def _resolve_station(self, station: Station, previous: Optional[WindReading]) -> StationData:
        current, source = self._resolve_current(station, previous)
        historic = self._resolve_historic(station, current)
        return StationData(current=current, historic=tuple(historic), source=source)

    def _resolve_current(self, station: Station, previous: Optional[WindReading]) -> tuple[WindReading, str]:
        if self.client is not None:
            try:
                return self.client.fetch_current(station.id), "api"
            except FetchError as e:
                log.warning(f"Current reading for {station.name} unavailable, simulating: {e}")
        return simulate_current(station, previous, rng=self.rng), "simulated"

    def _resolve_historic(self, station: Station, current: WindReading) -> list[HistoricPoint]:
        if self.client is not None:
            try:
                return self.client.fetch_historic(station.id, hours=self.historic_hours)
            except FetchError as e:
                log.warning(f"History for {station.name} unavailable, simulating: {e}")
        return simulate_historic(current, rng=self.rng)

    async def run(self, on_update: Optional[UpdateCallback] = None) -> None:
        """
        Poll forever at a fixed cadence; cancel the task to stop.

        Each cycle starts one interval after the previous one started. A cycle
        that overruns the interval is followed immediately by the next.

        Args:
            on_update: Called on the event loop with each published snapshot
        """
        loop = asyncio.get_running_loop()
        interval = self.poll_interval_ms / 1000
        while True:
            started = loop.time()
            try:
                # Blocking HTTP runs off the loop; the snapshot is only
                # published here, so a cancelled fetch never lands.
                self._state = await asyncio.to_thread(self.collect, self._state)
                if on_update is not None:
                    on_update(self._state)
            except Exception:
                log.exception("Poll cycle failed")
            await asyncio.sleep(max(0.0, interval - (loop.time() - started)))

    def start(self, on_update: Optional[UpdateCallback] = None) -> asyncio.Task:
        """Schedule the poll loop on the running event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self.run(on_update))
        return self._task

    async def stop(self) -> None:
        """Stop polling and abandon any in-flight fetch."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    # ==================== Derived views ====================

    def current(self, station: Station = UPSTREAM) -> Optional[WindReading]:
        return self._state.current(station.id)

    def historic(self, station: Station = UPSTREAM) -> tuple[HistoricPoint, ...]:
        return self._state.historic(station.id)

    def slope(self, station: Station = UPSTREAM) -> float:
        return trends.slope(self._state.historic(station.id))

    def is_building(self, station: Station = UPSTREAM) -> bool:
        state = self._state
        return trends.is_building(state.current(station.id), state.historic(station.id))

    def trend_delta(self, station: Station = UPSTREAM) -> Optional[float]:
        state = self._state
        return trends.trend_delta(state.current(station.id), state.historic(station.id))

    def eta_minutes(self) -> Optional[int]:
        """Minutes until building upstream wind reaches the downstream station."""
        state = self._state
        upstream = state.current(UPSTREAM.id)
        building = trends.is_building(upstream, state.historic(UPSTREAM.id))
        return trends.eta_minutes(upstream, building, self.distance_km)

    def recommend_gear(self, weight_kg: float) -> GearRecommendation:
        """Gear for the rider at the current upstream wind."""
        upstream = self.current(UPSTREAM)
        wind = upstream.wind.speed if upstream is not None else DEFAULT_GEAR_WIND_MS
        return recommend_gear(weight_kg, wind)
