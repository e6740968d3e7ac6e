# ABOUTME: HTTP client for the optional remote wind API
# ABOUTME: Fetches current and historic station data with a bounded timeout

import logging
import socket
import threading
import time
import requests
from typing import Optional

from windtracker.weather.errors import (
    FetchError,
    FetchTimeoutError,
    HttpStatusError,
    MalformedPayloadError,
)
from windtracker.weather.models import HistoricPoint, WindReading

log = logging.getLogger(__name__)


class WindApiClient:
    """
    Client for a wind API serving the two endpoints:

        GET {base}/current?stationId={id}
        GET {base}/historic?stationId={id}&hours={n}

    Any failure raises a FetchError subclass; retrying or falling back is
    left to the caller.
    """

    DEFAULT_TIMEOUT_SECONDS = 8.0

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT_SECONDS

    def fetch_current(self, station_id: int) -> WindReading:
        """
        Fetch the latest reading for a station.

        Returns:
            WindReading with an ISO-8601 timestamp

        Raises:
            FetchError: on timeout, network error, non-2xx or malformed body
        """
        data = self._get_json("current", {"stationId": station_id})
        if not isinstance(data, dict):
            raise MalformedPayloadError(f"Expected object for current reading, got {type(data).__name__}")
        return WindReading.from_dict(data)

    def fetch_historic(self, station_id: int, hours: int = 6) -> list[HistoricPoint]:
        """Fetch a station's history, oldest first."""
        data = self._get_json("historic", {"stationId": station_id, "hours": hours})
        if not isinstance(data, list):
            raise MalformedPayloadError(f"Expected array for historic data, got {type(data).__name__}")
        return [HistoricPoint.from_dict(point) for point in data]

    def _get_json(self, endpoint: str, params: dict):
        """
        GET an endpoint and decode its JSON body within one overall deadline.

        requests' timeout only bounds each connect/read, so a server that
        drips bytes could hold the call open indefinitely. The body is read
        under a watchdog that shuts the socket down once the deadline passes.
        """
        url = f"{self.base_url}/{endpoint}"
        deadline = time.monotonic() + self.timeout

        try:
            response = requests.get(url, params=params, timeout=self.timeout, stream=True)
        except requests.Timeout as e:
            log.error(f"Wind API timed out after {self.timeout}s: {url}")
            raise FetchTimeoutError(f"{url} timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            log.error(f"Wind API request failed: {e}")
            raise FetchError(str(e)) from e

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            response.close()
            log.error(f"Wind API response exceeded {self.timeout}s: {url}")
            raise FetchTimeoutError(f"{url} exceeded {self.timeout}s")

        expired = threading.Event()
        watchdog = threading.Timer(remaining, _abort_read, args=(response, expired))
        watchdog.daemon = True
        watchdog.start()
        try:
            if not 200 <= response.status_code < 300:
                log.error(f"Wind API HTTP error: {response.status_code} - {url}")
                raise HttpStatusError(response.status_code)

            try:
                response.content
            except requests.RequestException as e:
                if not expired.is_set():
                    log.error(f"Wind API read failed: {e}")
                    raise FetchError(str(e)) from e

            if expired.is_set():
                log.error(f"Wind API response exceeded {self.timeout}s: {url}")
                raise FetchTimeoutError(f"{url} exceeded {self.timeout}s")

            try:
                return response.json()
            except ValueError as e:
                log.error(f"Wind API returned invalid JSON from {url}: {e}")
                raise MalformedPayloadError(f"Invalid JSON from {url}") from e
        finally:
            watchdog.cancel()
            response.close()


def _abort_read(response, expired: threading.Event) -> None:
    """Shut down the response socket so a blocked body read returns."""
    expired.set()
    sock = getattr(getattr(response.raw, "connection", None), "sock", None)
    if sock is None:
        return
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError as e:
        log.debug(f"Socket already closed while aborting read: {e}")
