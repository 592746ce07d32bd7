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
AQI health band classification
"""

from . import const
from .models import AqiCategory


def classify(aqi: int) -> AqiCategory:
    """
    Map an AQI value to its health band.

    Band upper bounds are inclusive: 50 is still 'good', 51 is 'moderate'.

    :param aqi: Air Quality Index value
    :type aqi: int
    :return: Category with colour band and health advisory
    :rtype: AqiCategory
    """
    for limit, level in sorted(const.AQI_LEVELS.items()):
        if aqi <= limit:
            return AqiCategory(*level)

    return AqiCategory(*const.AQI_HAZARDOUS)
