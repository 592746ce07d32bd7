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
Location search through OpenStreetMap Nominatim
"""

import logging
import threading

from geopy.exc import GeocoderServiceError
from geopy.geocoders import Nominatim
import requests

from . import const
from .models import Coordinate, GeocodeResult

_LOGGER = logging.getLogger(__name__)


class Geocoder:
    """
    Resolves free-text queries to candidate coordinates.

    Failures never propagate: they are turned into a single
    non-selectable placeholder result.
    """

    def __init__(
        self,
        geolocator=None,
        user_agent=const.USER_AGENT,
        timeout=const.NOMINATIM_TIMEOUT,
        max_results=const.MAX_GEOCODE_RESULTS
    ):
        """
        Initialize the geocoder.

        :param geolocator: geopy geocoder to use, a Nominatim instance is created if omitted
        :param user_agent: User-Agent for Nominatim requests
        :type user_agent: str
        :param timeout: Geocoding timeout in seconds
        :type timeout: float
        :param max_results: Maximum number of results returned per search
        :type max_results: int
        """
        self._geolocator = geolocator or Nominatim(user_agent=user_agent, timeout=timeout)
        self._max_results = max_results


    def search(self, query: str) -> list[GeocodeResult]:
        """
        Search for locations matching a query.

        :param query: Free-text location query
        :type query: str
        :return: Up to `max_results` results in upstream order, a single
                 placeholder when nothing matched or the lookup failed, or an
                 empty list for a blank query
        :rtype: list[GeocodeResult]
        """
        if not query or not query.strip():
            return []

        _LOGGER.info("Searching locations for '%s'...", query)
        try:
            locations = self._geolocator.geocode(query, exactly_one=False)

            if not locations:
                _LOGGER.warning("No locations found for '%s'.", query)
                return [GeocodeResult(const.NO_LOCATIONS_FOUND, None, selectable=False)]

            results = [
                GeocodeResult(
                    display_name=location.address,
                    coordinate=Coordinate(float(location.latitude), float(location.longitude)),
                )
                for location in locations[:self._max_results]
            ]

        except (requests.exceptions.RequestException, GeocoderServiceError,
                ValueError, TypeError) as exc:
            _LOGGER.error("Error fetching locations for '%s': %s", query, exc)
            return [GeocodeResult(const.ERROR_LOADING_LOCATIONS, None, selectable=False)]

        _LOGGER.info("Found %d location(s) for '%s'.", len(results), query)
        return results


class LocationSearch:
    """
    Search-as-you-type session over a Geocoder.

    Each call to `search` is numbered; a finished search only replaces
    `results` when no newer search has been started since, so a slow,
    stale response can never overwrite a fresher one.
    """

    def __init__(self, geocoder: Geocoder):
        self._geocoder = geocoder
        self._lock = threading.Lock()
        self._generation = 0
        self._results: list[GeocodeResult] = []

    @property
    def results(self) -> list[GeocodeResult]:
        """Results of the most recently started search that has completed."""
        with self._lock:
            return list(self._results)

    def search(self, query: str) -> list[GeocodeResult]:
        """
        Run a search and publish its results unless superseded.

        :param query: Free-text location query
        :type query: str
        :return: Results of this particular search
        :rtype: list[GeocodeResult]
        """
        with self._lock:
            self._generation += 1
            generation = self._generation

        results = self._geocoder.search(query)

        with self._lock:
            if generation == self._generation:
                self._results = results
            else:
                _LOGGER.debug("Discarding stale results for '%s'.", query)

        return results
