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
Air Quality lookup for a selected location
"""

import logging

from . import const
from .aggregator import aggregate_readings, fetch_station_details
from .classification import classify
from .config import Settings
from .exceptions import AirQualityError, StationNotFoundError
from .forecast import format_forecast
from .geocoder import Geocoder, LocationSearch
from .models import (
    AirQualityReport,
    CompositeReading,
    Coordinate,
    ForecastSeries,
    GeocodeResult,
    Station,
)
from .stations import select_nearest
from .waqi import WaqiClient

_LOGGER = logging.getLogger(__name__)


class AirQuality:
    """
    A client combining Nominatim geocoding with WAQI station data.

    The readings of the nearest stations around a location are averaged
    into one composite reading.
    """

    @classmethod
    def from_env(cls, dotenv_path=None, **kwargs) -> "AirQuality":
        """
        Create a client configured from the environment (and a `.env` file).

        :raises ConfigurationError: If the WAQI token is missing
        """
        return cls(Settings.from_env(dotenv_path), **kwargs)


    def __init__(
        self,
        settings: Settings,
        geocoder=None,
        client=None,
        station_limit=const.MAX_STATIONS
    ):
        """
        Initialize the Air Quality client.

        :param settings: Validated configuration
        :type settings: Settings
        :param geocoder: Geocoder to use, created from `settings` if omitted
        :type geocoder: Geocoder, optional
        :param client: WAQI client to use, created from `settings` if omitted
        :type client: WaqiClient, optional
        :param station_limit: Number of nearest stations to aggregate
        :type station_limit: int
        """
        self._settings = settings
        self._station_limit = station_limit

        self._geocoder = geocoder or Geocoder(
            user_agent=settings.user_agent,
            timeout=settings.nominatim_timeout,
        )
        self._client = client or WaqiClient(
            settings.waqi_token,
            request_timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        )


    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def geocoder(self) -> Geocoder:
        return self._geocoder

    @property
    def client(self) -> WaqiClient:
        return self._client


    def search_locations(self, query: str) -> list[GeocodeResult]:
        """
        Search candidate locations for a free-text query.

        :param query: Location query, e.g. 'Brno'
        :type query: str
        :rtype: list[GeocodeResult]
        """
        return self._geocoder.search(query)


    def location_search(self) -> LocationSearch:
        """
        Start a search-as-you-type session where newer searches win.

        :rtype: LocationSearch
        """
        return LocationSearch(self._geocoder)


    def find_nearest_stations(self, origin: Coordinate) -> list[Station]:
        """
        Find the stations closest to a point.

        :param origin: Point to search around
        :type origin: Coordinate
        :return: Up to `station_limit` stations, closest first
        :rtype: list[Station]
        :raises StationNotFoundError: If no station is in range
        :raises DataDownloadError: If the station lookup fails
        """
        candidates = self._client.get_stations_in_bounds(origin)
        if not candidates:
            raise StationNotFoundError(const.NO_STATIONS_FOUND)

        return select_nearest(origin, candidates, limit=self._station_limit)


    def get_composite_reading(self, origin: Coordinate) -> CompositeReading:
        """
        Average the current readings of the nearest stations.

        Fails as a whole if any single station feed cannot be fetched.

        :param origin: Point to search around
        :type origin: Coordinate
        :rtype: CompositeReading
        :raises StationNotFoundError: If no station is in range
        :raises DataDownloadError: If the lookup or any station feed fails
        """
        _, reading = self._aggregate(origin)
        return reading


    def _aggregate(self, origin: Coordinate) -> tuple[list[Station], CompositeReading]:
        ranked = self.find_nearest_stations(origin)
        details = fetch_station_details(self._client, ranked)
        return ranked, aggregate_readings(details, ranked)


    def get_forecast(self, station: Station) -> ForecastSeries | None:
        """
        Forecast series of a station.

        Errors are logged and swallowed, a missing forecast is not fatal.

        :param station: Station to get the forecast for
        :type station: Station
        :return: Series, or None when unavailable
        :rtype: ForecastSeries | None
        """
        try:
            return format_forecast(self._client.get_station_feed(station.uid))
        except (AirQualityError, AttributeError, KeyError, TypeError, ValueError) as exc:
            _LOGGER.error("Failed to fetch forecast for station %s: %s", station.uid, exc)
            return None


    def get_air_quality_report(self, location: Coordinate | GeocodeResult) -> AirQualityReport:
        """
        Get the full air quality report for a selected location.

        :param location: Coordinate, or a selectable search result
        :type location: Coordinate | GeocodeResult
        :return: Composite reading, its health category and the forecast of
                 the closest station
        :rtype: AirQualityReport
        :raises ValueError: If a placeholder search result is passed
        :raises StationNotFoundError: If no station is in range
        :raises DataDownloadError: If the lookup or any station feed fails
        """
        if isinstance(location, GeocodeResult):
            if not location.selectable or location.coordinate is None:
                raise ValueError(f"'{location.display_name}' is not a selectable location.")
            origin = location.coordinate
        else:
            origin = location

        ranked, reading = self._aggregate(origin)

        category = classify(reading.aqi) if reading.aqi is not None else None
        forecast = self.get_forecast(ranked[0])

        _LOGGER.info(
            "Air quality at %s: AQI %s (%s).",
            origin, reading.aqi, category.label if category else "N/A",
        )
        return AirQualityReport(
            origin=origin,
            reading=reading,
            category=category,
            forecast=forecast,
        )
