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
Provides a python client for finding nearby air quality stations
and aggregating their readings from the WAQI open data feed.
"""

__version__ = "0.1.0"

from .airquality import AirQuality
from .classification import classify
from .config import Settings
from .distance import distance_km
from .exceptions import (
    AirQualityError,
    ConfigurationError,
    DataDownloadError,
    StationNotFoundError,
)
from .forecast import format_forecast
from .geocoder import Geocoder, LocationSearch
from .models import (
    AirQualityReport,
    AqiCategory,
    CompositeReading,
    ContributingStation,
    Coordinate,
    ForecastSeries,
    GeocodeResult,
    Station,
    StationDetail,
)
from .stations import select_nearest
from .waqi import WaqiClient

__all__ = [
    "AirQuality",
    "AirQualityError",
    "AirQualityReport",
    "AqiCategory",
    "CompositeReading",
    "ConfigurationError",
    "ContributingStation",
    "Coordinate",
    "DataDownloadError",
    "ForecastSeries",
    "GeocodeResult",
    "Geocoder",
    "LocationSearch",
    "Settings",
    "Station",
    "StationDetail",
    "StationNotFoundError",
    "WaqiClient",
    "classify",
    "distance_km",
    "format_forecast",
    "select_nearest",
    "__version__",
]
