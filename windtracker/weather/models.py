# ABOUTME: Data models for station wind readings and historic samples
# ABOUTME: Parses and emits the JSON shapes served by the remote wind API

from dataclasses import dataclass
from typing import Any, Optional

from windtracker.conversions import deg_to_cardinal
from windtracker.weather.errors import MalformedPayloadError


def normalize_timestamp(date_time: str) -> str:
    """
    Normalize an API timestamp to ISO-8601.

    Accepts either ISO-8601 ("2024-05-01T12:00:00") or the space-separated
    "YYYY-MM-DD HH:mm:ss" form some stations report.
    """
    if "T" in date_time:
        return date_time
    return date_time.replace(" ", "T", 1)


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


@dataclass
class Wind:
    """Wind block of a reading, speeds in m/s"""
    speed: float
    gust: float
    min: float
    direction: float         # degrees, 0-360
    unit: str = "m/s"


@dataclass
class WindReading:
    """Latest reading for one station"""
    station_id: int
    station_name: str
    date_time: str           # ISO-8601
    wind: Wind
    # Optional fields - not every station reports them
    humidity: Optional[float] = None
    pressure: Optional[float] = None
    rain: Optional[float] = None
    temperature: Optional[float] = None

    def __str__(self) -> str:
        return (
            f"Wind: {self.wind.speed:.1f}{self.wind.unit} {self.cardinal} "
            f"(gusts {self.wind.gust:.1f}, min {self.wind.min:.1f}) "
            f"@ {self.station_name}"
        )

    @property
    def cardinal(self) -> str:
        """16-point compass name of the wind direction."""
        return deg_to_cardinal(self.wind.direction)

    @classmethod
    def from_dict(cls, payload: dict) -> "WindReading":
        """
        Parse an API payload into a WindReading.

        Args:
            payload: {stationId, stationName, dateTime, wind: {...}, ...}

        Returns:
            WindReading with its timestamp normalized to ISO-8601

        Raises:
            MalformedPayloadError: if required fields are missing or not numeric
        """
        try:
            wind = payload["wind"]
            return cls(
                station_id=int(payload["stationId"]),
                station_name=str(payload.get("stationName", "")),
                date_time=normalize_timestamp(str(payload["dateTime"])),
                wind=Wind(
                    speed=float(wind["speed"]),
                    gust=float(wind["gust"]),
                    min=float(wind["min"]),
                    direction=float(wind["direction"]),
                    unit=str(wind.get("unit", "m/s")),
                ),
                humidity=_optional_float(payload.get("humidity")),
                pressure=_optional_float(payload.get("pressure")),
                rain=_optional_float(payload.get("rain")),
                temperature=_optional_float(payload.get("temperature")),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MalformedPayloadError(f"Invalid reading payload: {e!r}") from e

    def to_dict(self) -> dict:
        """Serialize back to the API JSON shape."""
        payload = {
            "stationId": self.station_id,
            "stationName": self.station_name,
            "dateTime": self.date_time,
            "wind": {
                "speed": self.wind.speed,
                "gust": self.wind.gust,
                "min": self.wind.min,
                "unit": self.wind.unit,
                "direction": self.wind.direction,
            },
        }
        for key in ("humidity", "pressure", "rain", "temperature"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload


@dataclass(frozen=True)
class HistoricPoint:
    """One sample of a station's wind history"""
    t: str                   # ISO-8601
    speed: float
    gust: float

    @classmethod
    def from_dict(cls, payload: dict) -> "HistoricPoint":
        try:
            return cls(
                t=normalize_timestamp(str(payload["t"])),
                speed=float(payload["speed"]),
                gust=float(payload["gust"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedPayloadError(f"Invalid historic point: {e!r}") from e

    def to_dict(self) -> dict:
        return {"t": self.t, "speed": self.speed, "gust": self.gust}
