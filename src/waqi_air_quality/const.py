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
Constants shared across the library
"""

USER_AGENT = "waqi-air-quality-python-client"

REQUEST_TIMEOUT = 10
NOMINATIM_TIMEOUT = 10

WAQI_BASE_URL = "https://api.waqi.info"
WAQI_BOUNDS_URL = WAQI_BASE_URL + "/map/bounds/"
WAQI_FEED_URL = WAQI_BASE_URL + "/feed/@{uid}/"

TOKEN_ENV_VAR = "WAQI_API_KEY"
REQUEST_TIMEOUT_ENV_VAR = "WAQI_REQUEST_TIMEOUT"
NOMINATIM_TIMEOUT_ENV_VAR = "NOMINATIM_TIMEOUT"

# Half-width of the bounding box (degrees) searched around a location
BOUNDS_DELTA = 0.15

EARTH_RADIUS_KM = 6371

MAX_GEOCODE_RESULTS = 5
MAX_STATIONS = 3

NO_LOCATIONS_FOUND = "No locations found"
ERROR_LOADING_LOCATIONS = "Error loading locations"
NO_STATIONS_FOUND = "No AQI stations found near this location"
FETCH_FAILED = "Failed to fetch AQI data. Please try again later."

POLLUTANT_CODES = ("pm25", "pm10", "o3", "no2", "so2", "co")

# Forecast pollutants in chart order: code -> (label, line colour, fill colour)
FORECAST_POLLUTANTS = {
    "pm25": ("PM2.5", "rgb(75, 192, 192)", "rgba(75, 192, 192, 0.2)"),
    "pm10": ("PM10", "rgb(255, 99, 132)", "rgba(255, 99, 132, 0.2)"),
    "o3": ("O3", "rgb(53, 162, 235)", "rgba(53, 162, 235, 0.2)"),
}

# Upper AQI bound (inclusive) -> (level, label, colour band, health advisory)
AQI_LEVELS = {
    50: (
        "good",
        "Good",
        "green",
        "Air quality is good. Perfect for outdoor activities!",
    ),
    100: (
        "moderate",
        "Moderate",
        "yellow",
        "Sensitive individuals should consider limiting prolonged outdoor exposure.",
    ),
    150: (
        "unhealthy-for-sensitive",
        "Unhealthy for Sensitive Groups",
        "orange",
        "Everyone should reduce prolonged or heavy outdoor exertion.",
    ),
    200: (
        "unhealthy",
        "Unhealthy",
        "red",
        "Avoid prolonged or heavy outdoor exertion.",
    ),
    300: (
        "very-unhealthy",
        "Very Unhealthy",
        "purple",
        "Stay indoors and keep activity levels low.",
    ),
}

AQI_HAZARDOUS = (
    "hazardous",
    "Hazardous",
    "maroon",
    "Hazardous conditions! Avoid all outdoor activities.",
)
