import pytest

from waqi_air_quality import Settings
from waqi_air_quality.exceptions import DataDownloadError
from waqi_air_quality.models import Coordinate, Station
from waqi_air_quality.waqi import parse_station_detail


def make_feed(aqi, name="Station", iaqi=None, iso="2025-01-15T14:00:00+01:00", daily=None):
    data = {
        "aqi": aqi,
        "city": {"name": name},
        "iaqi": {code: {"v": value} for code, value in (iaqi or {}).items()},
        "time": {"iso": iso},
    }
    if daily is not None:
        data["forecast"] = {"daily": daily}
    return data


class FakeWaqiClient:
    """In-memory stand-in for WaqiClient keyed by station uid."""

    def __init__(self, stations=None, feeds=None, failing=()):
        self.stations = stations or []
        self.feeds = feeds or {}
        self.failing = set(failing)
        self.feed_calls = []

    def get_stations_in_bounds(self, center):
        return list(self.stations)

    def get_station_feed(self, uid):
        self.feed_calls.append(uid)
        if uid in self.failing:
            raise DataDownloadError("Failed to fetch AQI data. Please try again later.")
        return self.feeds[uid]

    def get_station_detail(self, uid):
        return parse_station_detail(uid, self.get_station_feed(uid))


@pytest.fixture
def settings():
    return Settings(waqi_token="test-token")


@pytest.fixture
def origin():
    return Coordinate(50.0, 14.0)


@pytest.fixture
def feed_factory():
    return make_feed


@pytest.fixture
def station_factory():
    def _make(uid, lat, lon, name=None, aqi=None):
        return Station(uid=uid, coordinate=Coordinate(lat, lon), name=name, aqi=aqi)
    return _make


@pytest.fixture
def fake_client_class():
    return FakeWaqiClient
