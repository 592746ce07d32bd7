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
Combining the readings of several stations into one
"""

import logging
import math
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from . import const
from .models import CompositeReading, ContributingStation, Station, StationDetail

_LOGGER = logging.getLogger(__name__)


def fetch_station_details(client, ranked: Sequence[Station]) -> list[StationDetail]:
    """
    Fetch the feeds of all ranked stations concurrently.

    All requests are started at once and awaited together. The first
    failure is re-raised once every request has finished; no partial
    result is returned.

    :param client: Object with a `get_station_detail(uid)` method (WaqiClient)
    :param ranked: Stations to fetch, in ranked order
    :type ranked: Sequence[Station]
    :return: Details in the same order as `ranked`
    :rtype: list[StationDetail]
    :raises DataDownloadError: If any of the fetches fails
    """
    if not ranked:
        return []

    with ThreadPoolExecutor(max_workers=len(ranked)) as executor:
        futures = [executor.submit(client.get_station_detail, station.uid) for station in ranked]

    # The executor has joined every worker at this point
    return [future.result() for future in futures]


def arithmetic_mean(values: Iterable[float | None]) -> float | None:
    """
    Unweighted mean of the values that are present.

    Only None counts as missing, so zero readings are averaged in.

    :rtype: float | None
    """
    present = [value for value in values if value is not None]
    if not present:
        return None
    return sum(present) / len(present)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def aggregate_readings(details: Sequence[StationDetail],
        ranked: Sequence[Station]) -> CompositeReading:
    """
    Combine station feeds into one composite reading.

    - `aqi` is the mean of the stations' AQI values, rounded to the nearest integer
    - each pollutant is the mean over the stations that report it, None if none do
    - `observed_at` comes from the closest station only
    - every ranked station is listed with its own AQI and distance

    :param details: Station feeds, parallel to `ranked`
    :type details: Sequence[StationDetail]
    :param ranked: Stations ordered by ascending distance with `distance_km` set
    :type ranked: Sequence[Station]
    :rtype: CompositeReading
    :raises ValueError: If the sequences are empty or differ in length
    """
    if not details:
        raise ValueError("Cannot aggregate readings of zero stations.")
    if len(details) != len(ranked):
        raise ValueError(
            f"Got {len(details)} station feed(s) for {len(ranked)} ranked station(s)."
        )

    mean_aqi = arithmetic_mean(detail.aqi for detail in details)
    pollutants = {
        code: arithmetic_mean(detail.pollutants.get(code) for detail in details)
        for code in const.POLLUTANT_CODES
    }
    contributing = tuple(
        ContributingStation(
            name=detail.city_name if detail.city_name is not None else station.name,
            aqi=detail.aqi,
            distance_km=station.distance_km,
        )
        for detail, station in zip(details, ranked)
    )

    reading = CompositeReading(
        aqi=round_half_up(mean_aqi) if mean_aqi is not None else None,
        pollutants=pollutants,
        observed_at=details[0].observed_at,
        contributing_stations=contributing,
    )
    _LOGGER.info(
        "Aggregated %d station(s) into AQI %s.", len(details), reading.aqi
    )
    return reading
