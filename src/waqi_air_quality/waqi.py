#  Provides a python client for finding nearby air quality stations
#  and aggregating their readings from the WAQI open data feed.
#  Copyright (C) 2025 chickendrop89

#  This library is free software; you can redistribute it and/or modify it
#  under the terms of the GNU Lesser General Public License as published by
#  the Free Software Foundation; either version 3 of the License, or
#  (at your option) any later version.

#  This library is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU Lesser General Public License for more details.

"""
Client for the WAQI (World Air Quality Index) JSON API
"""

import logging
import math
from datetime import datetime

import requests

from . import const
from .exceptions import DataDownloadError
from .models import Coordinate, Station, StationDetail

_LOGGER = logging.getLogger(__name__)


class WaqiClient:
    """
    Thin wrapper around the WAQI map bounds and station feed endpoints.

    Any network, HTTP, JSON or API-level error is raised as DataDownloadError
    carrying a message suitable for showing to a user.
    """

    def __init__(self, token: str, request_timeout: float = const.REQUEST_TIMEOUT,
            session: requests.Session | None = None, user_agent: str = const.USER_AGENT):
        """
        Initialize the WAQI client.

        :param token: WAQI API token
        :type token: str
        :param request_timeout: HTTP request timeout in seconds
        :type request_timeout: float
        :param session: Session to issue requests with, plain `requests.get` if omitted
        :type session: requests.Session, optional
        :param user_agent: User-Agent header value
        :type user_agent: str
        """
        self._token = token
        self._request_timeout = request_timeout
        self._session = session
        self._user_agent = user_agent


    def get_stations_in_bounds(self, center: Coordinate,
            delta: float = const.BOUNDS_DELTA) -> list[Station]:
        """
        List stations inside a box of +/- `delta` degrees around a point.

        :param center: Centre of the bounding box
        :type center: Coordinate
        :param delta: Half-width of the box in degrees
        :type delta: float
        :return: Stations in upstream order; entries with invalid coordinates are skipped
        :rtype: list[Station]
        :raises DataDownloadError: If the lookup fails
        """
        latlng = ",".join(
            str(value) for value in (
                center.latitude - delta,
                center.longitude - delta,
                center.latitude + delta,
                center.longitude + delta,
            )
        )
        data = self._get(const.WAQI_BOUNDS_URL, {"latlng": latlng})

        if not isinstance(data, list):
            raise DataDownloadError("Unexpected response format from station bounds lookup.")

        stations = []
        for item in data:
            try:
                stations.append(
                    Station(
                        uid=int(item["uid"]),
                        coordinate=Coordinate(float(item["lat"]), float(item["lon"])),
                        name=(item.get("station") or {}).get("name"),
                        aqi=parse_aqi(item.get("aqi")),
                    )
                )
            except (KeyError, TypeError, ValueError):
                _LOGGER.debug("Skipping station entry with invalid data: %s", item)
                continue

        _LOGGER.info("Found %d station(s) around %s.", len(stations), center)
        return stations


    def get_station_feed(self, uid: int) -> dict:
        """
        Raw feed `data` object of a single station.

        :param uid: WAQI station identifier
        :type uid: int
        :rtype: dict
        :raises DataDownloadError: If the request fails
        """
        data = self._get(const.WAQI_FEED_URL.format(uid=uid))

        if not isinstance(data, dict):
            raise DataDownloadError(f"Unexpected response format from feed of station {uid}.")
        return data


    def get_station_detail(self, uid: int) -> StationDetail:
        """
        Parsed feed of a single station.

        :param uid: WAQI station identifier
        :type uid: int
        :rtype: StationDetail
        :raises DataDownloadError: If the request fails
        """
        return parse_station_detail(uid, self.get_station_feed(uid))


    def _get(self, url: str, params: dict | None = None):
        """
        Perform a GET request and unwrap the WAQI `{"status", "data"}` envelope.

        :param url: Endpoint URL
        :type url: str
        :param params: Query parameters besides the token
        :type params: dict, optional
        :return: The `data` member of the response
        :raises DataDownloadError: On network, HTTP, JSON or API errors
        """
        query = {"token": self._token}
        query.update(params or {})
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
        }
        get = self._session.get if self._session is not None else requests.get

        try:
            response = get(url, params=query, headers=headers, timeout=self._request_timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as exc:
            _LOGGER.error("Request to %s failed: %s", url, exc)
            raise DataDownloadError(const.FETCH_FAILED) from exc
        except ValueError as exc:
            _LOGGER.error("Response from %s is not valid JSON: %s", url, exc)
            raise DataDownloadError(const.FETCH_FAILED) from exc

        if not isinstance(payload, dict):
            raise DataDownloadError(const.FETCH_FAILED)

        if payload.get("status") != "ok":
            message = payload.get("data") or payload.get("message")
            _LOGGER.error("WAQI API error from %s: %s", url, message)
            if isinstance(message, dict):
                message = message.get("message")
            raise DataDownloadError(message if isinstance(message, str) and message else const.FETCH_FAILED)

        return payload.get("data")


def parse_aqi(value) -> float | None:
    """
    Parse an AQI value; WAQI sends numbers, numeric strings or '-' when unknown.

    Values are not rounded here, rounding happens once on the aggregate.

    :rtype: float | None
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        aqi = float(value)
    except (TypeError, ValueError):
        return None

    return aqi if math.isfinite(aqi) else None


def _parse_concentration(entry) -> float | None:
    if not isinstance(entry, dict):
        return None

    value = entry.get("v")
    if value is None or isinstance(value, bool):
        return None

    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_time(time_section) -> datetime | None:
    if not isinstance(time_section, dict) or not time_section.get("iso"):
        return None

    try:
        return datetime.fromisoformat(time_section["iso"])
    except (TypeError, ValueError):
        _LOGGER.debug("Skipping invalid observation time: %s", time_section.get("iso"))
        return None


def _section(data: dict, key: str) -> dict:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def parse_station_detail(uid: int, data: dict) -> StationDetail:
    """
    Build a StationDetail from a feed `data` object.

    Pollutants missing from `iaqi` are None, never zero.

    :param uid: Station identifier the feed was requested for
    :type uid: int
    :param data: Feed `data` object
    :type data: dict
    :rtype: StationDetail
    """
    iaqi = _section(data, "iaqi")
    forecast = _section(_section(data, "forecast"), "daily")
    city = _section(data, "city")

    return StationDetail(
        uid=uid,
        aqi=parse_aqi(data.get("aqi")),
        city_name=city.get("name"),
        pollutants={code: _parse_concentration(iaqi.get(code)) for code in const.POLLUTANT_CODES},
        observed_at=_parse_time(data.get("time")),
        forecast=forecast,
    )
