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
Forecast reshaping into chart series
"""

import logging
from datetime import date

from . import const
from .models import ForecastSeries

_LOGGER = logging.getLogger(__name__)


def format_forecast(data: dict | None) -> ForecastSeries | None:
    """
    Reshape the forecast of a station feed into chart-ready series.

    :param data: Feed `data` object of a station
    :type data: dict | None
    :return: Series of daily averages, or None when there is nothing to chart
    :rtype: ForecastSeries | None
    """
    if not data or not isinstance(data.get("forecast"), dict):
        return None

    return format_daily_forecast(data["forecast"].get("daily"))


def format_daily_forecast(daily: dict | None) -> ForecastSeries | None:
    """
    Build series from a `forecast.daily` mapping of pollutant code to
    `[{"day": "YYYY-MM-DD", "avg": ...}, ...]`.

    Only PM2.5, PM10 and O3 are charted. The date axis is taken from the
    first of those, in payload order, that has data points; the other
    series are assumed to share it.

    :param daily: Mapping of pollutant code to daily entries
    :type daily: dict | None
    :rtype: ForecastSeries | None
    """
    if not daily or not isinstance(daily, dict):
        return None

    series = {}
    for code, (label, _, _) in const.FORECAST_POLLUTANTS.items():
        entries = daily.get(code)
        if entries:
            series[label] = tuple(float(entry["avg"]) for entry in entries)

    if not series:
        _LOGGER.debug("Forecast has no data for any charted pollutant.")
        return None

    axis_code = next(
        code for code, entries in daily.items()
        if code in const.FORECAST_POLLUTANTS and entries
    )
    dates = tuple(date.fromisoformat(entry["day"]) for entry in daily[axis_code])

    return ForecastSeries(dates=dates, series=series)
