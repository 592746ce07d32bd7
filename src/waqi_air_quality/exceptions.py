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
Exceptions raised by the waqi-air-quality library
"""


class AirQualityError(Exception):
    """Base exception for the waqi-air-quality library."""

class DataDownloadError(AirQualityError):
    """Raised when data cannot be downloaded or is invalid."""

class StationNotFoundError(AirQualityError):
    """Raised when no monitoring station is found near a location."""

class ConfigurationError(AirQualityError):
    """Raised when required configuration is missing or invalid."""
