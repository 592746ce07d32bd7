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
Data objects produced by the library
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from . import const


@dataclass(frozen=True)
class Coordinate:
    """A point on the Earth's surface in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude {self.latitude} is outside [-90, 90].")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude {self.longitude} is outside [-180, 180].")


@dataclass(frozen=True)
class GeocodeResult:
    """
    One candidate location for a search query.

    Placeholder results ("No locations found", "Error loading locations")
    have no coordinate and are not selectable.
    """

    display_name: str
    coordinate: Coordinate | None
    selectable: bool = True


@dataclass(frozen=True)
class Station:
    """Summary of a monitoring station as returned by the bounds lookup."""

    uid: int
    coordinate: Coordinate
    name: str | None = None
    aqi: float | None = None
    distance_km: float | None = None


@dataclass(frozen=True)
class StationDetail:
    """Full feed of a single station."""

    uid: int
    aqi: float | None
    city_name: str | None
    pollutants: dict[str, float | None]
    observed_at: datetime | None
    forecast: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ContributingStation:
    name: str | None
    aqi: float | None
    distance_km: float


@dataclass(frozen=True)
class CompositeReading:
    """
    Readings of the nearest stations combined into one.

    `pollutants` holds every code of `const.POLLUTANT_CODES`; a value of
    None means none of the contributing stations reported that pollutant.
    """

    aqi: int | None
    pollutants: dict[str, float | None]
    observed_at: datetime | None
    contributing_stations: tuple[ContributingStation, ...]


@dataclass(frozen=True)
class AqiCategory:
    level: str
    label: str
    color_band: str
    health_advisory: str


@dataclass(frozen=True)
class ForecastSeries:
    """Daily forecast averages keyed by pollutant label, sharing one date axis."""

    dates: tuple[date, ...]
    series: dict[str, tuple[float, ...]]

    def date_labels(self) -> list[str]:
        """
        Short month/day labels for the date axis, e.g. 'Jan 5'.

        :rtype: list[str]
        """
        return [f"{day.strftime('%b')} {day.day}" for day in self.dates]

    def to_chart_data(self) -> dict:
        """
        Chart-ready structure with one dataset per pollutant.

        :return: Dictionary with `labels` and `datasets` keys
        :rtype: dict
        """
        colours = {label: (line, fill) for label, line, fill in const.FORECAST_POLLUTANTS.values()}
        datasets = []

        for label, values in self.series.items():
            line, fill = colours.get(label, (None, None))
            datasets.append(
                {
                    "label": label,
                    "data": list(values),
                    "borderColor": line,
                    "backgroundColor": fill,
                }
            )

        return {"labels": self.date_labels(), "datasets": datasets}


@dataclass(frozen=True)
class AirQualityReport:
    """Everything needed to render the air quality of one selected location."""

    origin: Coordinate
    reading: CompositeReading
    category: AqiCategory | None
    forecast: ForecastSeries | None = None
