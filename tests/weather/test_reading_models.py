# ABOUTME: Tests for wind reading data models
# ABOUTME: Validates payload parsing, timestamp normalization and serialization

import pytest

from windtracker.weather.errors import MalformedPayloadError
from windtracker.weather.models import HistoricPoint, Wind, WindReading, normalize_timestamp


def make_payload(**overrides) -> dict:
    payload = {
        "stationId": 101,
        "stationName": "Drøbak",
        "dateTime": "2024-05-01 12:00:00",
        "wind": {"speed": 6.2, "gust": 8.1, "min": 5.0, "unit": "m/s", "direction": 195},
        "humidity": 63.0,
        "pressure": 1012.4,
    }
    payload.update(overrides)
    return payload


class TestNormalizeTimestamp:
    """Timestamps from the API are normalized to ISO-8601"""

    def test_space_separated_form_gets_t_separator(self):
        assert normalize_timestamp("2024-05-01 12:00:00") == "2024-05-01T12:00:00"

    def test_iso_form_passes_through(self):
        assert normalize_timestamp("2024-05-01T12:00:00+02:00") == "2024-05-01T12:00:00+02:00"


class TestWindReading:
    """Tests for WindReading parsing"""

    def test_from_dict_parses_all_fields(self):
        reading = WindReading.from_dict(make_payload())

        assert reading.station_id == 101
        assert reading.station_name == "Drøbak"
        assert reading.date_time == "2024-05-01T12:00:00"
        assert reading.wind == Wind(speed=6.2, gust=8.1, min=5.0, direction=195.0, unit="m/s")
        assert reading.humidity == 63.0
        assert reading.pressure == 1012.4
        assert reading.rain is None
        assert reading.temperature is None

    def test_missing_wind_block_is_malformed(self):
        payload = make_payload()
        del payload["wind"]

        with pytest.raises(MalformedPayloadError):
            WindReading.from_dict(payload)

    def test_non_numeric_speed_is_malformed(self):
        payload = make_payload(wind={"speed": "calm", "gust": 1, "min": 0, "direction": 0})

        with pytest.raises(MalformedPayloadError):
            WindReading.from_dict(payload)

    def test_to_dict_uses_api_field_names(self):
        payload = WindReading.from_dict(make_payload()).to_dict()

        assert payload["stationId"] == 101
        assert payload["dateTime"] == "2024-05-01T12:00:00"
        assert payload["wind"]["gust"] == 8.1
        assert "rain" not in payload

    def test_cardinal_and_string_representation(self):
        reading = WindReading.from_dict(make_payload())

        assert reading.cardinal == "SSW"
        result = str(reading)
        assert "6.2" in result
        assert "SSW" in result
        assert "Drøbak" in result


class TestHistoricPoint:
    """Tests for HistoricPoint parsing"""

    def test_from_dict_normalizes_timestamp(self):
        point = HistoricPoint.from_dict({"t": "2024-05-01 11:55:00", "speed": 5.5, "gust": 7})

        assert point == HistoricPoint(t="2024-05-01T11:55:00", speed=5.5, gust=7.0)

    def test_missing_gust_is_malformed(self):
        with pytest.raises(MalformedPayloadError):
            HistoricPoint.from_dict({"t": "2024-05-01T11:55:00", "speed": 5.5})
