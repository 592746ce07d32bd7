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
Nearest station selection
"""

import dataclasses
import logging
from collections.abc import Iterable

from . import const
from .distance import distance_km
from .models import Coordinate, Station

_LOGGER = logging.getLogger(__name__)


def select_nearest(origin: Coordinate, candidates: Iterable[Station],
        limit: int = const.MAX_STATIONS) -> list[Station]:
    """
    Rank stations by distance from a point and keep the closest ones.

    Stations at equal distance keep their upstream order.
    Returned stations are new instances with `distance_km` set.

    :param origin: Point to measure from
    :type origin: Coordinate
    :param candidates: Stations to rank
    :type candidates: Iterable[Station]
    :param limit: Maximum number of stations to return
    :type limit: int
    :return: Up to `limit` stations sorted by ascending distance
    :rtype: list[Station]
    """
    ranked = [
        dataclasses.replace(station, distance_km=distance_km(origin, station.coordinate))
        for station in candidates
    ]
    # list.sort is stable, so ties keep their input order
    ranked.sort(key=lambda station: station.distance_km)

    selected = ranked[:max(limit, 0)]
    for station in selected:
        _LOGGER.debug(
            "Selected station %s (%s) at %.2f km.", station.uid, station.name, station.distance_km
        )
    return selected
