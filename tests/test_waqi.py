from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
import requests

from waqi_air_quality.exceptions import DataDownloadError
from waqi_air_quality.models import Coordinate
from waqi_air_quality.waqi import WaqiClient, parse_aqi, parse_station_detail


def response(payload, status_code=200):
    mock = MagicMock()
    mock.status_code = status_code
    mock.json.return_value = payload
    if status_code >= 400:
        mock.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    return mock


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return WaqiClient("secret", request_timeout=5, session=session)


def test_bounds_request_parameters(client, session):
    session.get.return_value = response({"status": "ok", "data": []})

    client.get_stations_in_bounds(Coordinate(50.0, 14.0))

    url = session.get.call_args.args[0]
    kwargs = session.get.call_args.kwargs
    assert url == "https://api.waqi.info/map/bounds/"
    assert kwargs["params"]["token"] == "secret"
    lat1, lon1, lat2, lon2 = (float(v) for v in kwargs["params"]["latlng"].split(","))
    assert (lat1, lon1, lat2, lon2) == pytest.approx((49.85, 13.85, 50.15, 14.15))
    assert kwargs["timeout"] == 5
    assert "User-Agent" in kwargs["headers"]


def test_bounds_parses_stations(client, session):
    session.get.return_value = response({
        "status": "ok",
        "data": [
            {"uid": 101, "lat": 50.05, "lon": 14.01, "aqi": "42", "station": {"name": "Alpha"}},
            {"uid": 102, "lat": 50.10, "lon": 14.10, "aqi": "-", "station": {"name": "Beta"}},
            {"uid": 103, "lat": "oops", "lon": 14.10, "aqi": "12"},
            {"lat": 50.0, "lon": 14.0, "aqi": "12"},
        ],
    })

    stations = client.get_stations_in_bounds(Coordinate(50.0, 14.0))

    assert [s.uid for s in stations] == [101, 102]
    assert stations[0].name == "Alpha"
    assert stations[0].aqi == 42
    assert stations[1].aqi is None
    assert stations[0].coordinate == Coordinate(50.05, 14.01)


def test_api_error_message_is_surfaced(client, session):
    session.get.return_value = response({"status": "error", "data": "Invalid key"})

    with pytest.raises(DataDownloadError, match="Invalid key"):
        client.get_stations_in_bounds(Coordinate(50.0, 14.0))


def test_network_error_becomes_default_message(client, session):
    session.get.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(DataDownloadError, match="Failed to fetch AQI data"):
        client.get_station_feed(5)


def test_http_error(client, session):
    session.get.return_value = response({}, status_code=500)

    with pytest.raises(DataDownloadError):
        client.get_station_feed(5)


def test_invalid_json(client, session):
    bad = response(None)
    bad.json.side_effect = ValueError("no json")
    session.get.return_value = bad

    with pytest.raises(DataDownloadError):
        client.get_station_feed(5)


def test_feed_url_uses_station_uid(client, session, feed_factory):
    session.get.return_value = response({"status": "ok", "data": feed_factory(33)})

    detail = client.get_station_detail(8079)

    assert session.get.call_args.args[0] == "https://api.waqi.info/feed/@8079/"
    assert detail.uid == 8079
    assert detail.aqi == 33


def test_plain_requests_used_without_session(monkeypatch, feed_factory):
    get = MagicMock(return_value=response({"status": "ok", "data": feed_factory(20)}))
    monkeypatch.setattr(requests, "get", get)

    WaqiClient("secret").get_station_feed(1)

    assert get.call_count == 1


def test_parse_station_detail(feed_factory):
    data = feed_factory(
        57,
        name="Praha 2-Legerova",
        iaqi={"pm25": 57, "no2": 0, "t": 3.2},
        iso="2025-01-15T14:00:00+01:00",
        daily={"pm25": [{"day": "2025-01-15", "avg": 50}]},
    )

    detail = parse_station_detail(1, data)

    assert detail.city_name == "Praha 2-Legerova"
    assert detail.pollutants["pm25"] == 57.0
    assert detail.pollutants["no2"] == 0.0
    assert detail.pollutants["o3"] is None
    assert "t" not in detail.pollutants
    assert detail.observed_at == datetime(2025, 1, 15, 14, 0, tzinfo=timezone(timedelta(hours=1)))
    assert "pm25" in detail.forecast


def test_parse_station_detail_with_missing_sections():
    detail = parse_station_detail(2, {"aqi": "-"})

    assert detail.aqi is None
    assert detail.city_name is None
    assert detail.observed_at is None
    assert detail.forecast == {}
    assert all(value is None for value in detail.pollutants.values())


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, 42.0), ("42", 42.0), ("50.5", 50.5), ("-", None), (None, None), ("", None),
        (True, None), ("nan", None), ("inf", None),
    ],
)
def test_parse_aqi(value, expected):
    assert parse_aqi(value) == expected


@pytest.mark.parametrize(
    "data",
    [
        {"aqi": 40, "forecast": "unexpected", "iaqi": [], "city": "Prague"},
        {"aqi": 40, "forecast": {"daily": ["unexpected"]}, "iaqi": None, "city": None},
    ],
)
def test_parse_station_detail_ignores_malformed_sections(data):
    detail = parse_station_detail(3, data)

    assert detail.aqi == 40
    assert detail.city_name is None
    assert detail.forecast == {}
    assert all(value is None for value in detail.pollutants.values())
