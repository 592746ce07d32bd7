from datetime import date

from waqi_air_quality.forecast import format_daily_forecast, format_forecast


def days(*values, start=10):
    return [
        {"day": f"2025-01-{start + i:02d}", "avg": value, "min": value - 1, "max": value + 1}
        for i, value in enumerate(values)
    ]


def test_missing_forecast_section():
    assert format_forecast({"aqi": 40}) is None
    assert format_forecast({"forecast": {}}) is None
    assert format_forecast(None) is None


def test_only_unrecognized_pollutants():
    assert format_forecast({"forecast": {"daily": {"uvi": days(1, 2)}}}) is None


def test_empty_series_are_ignored():
    assert format_forecast({"forecast": {"daily": {"pm25": [], "o3": []}}}) is None


def test_single_pm25_series():
    series = format_forecast({"forecast": {"daily": {"pm25": days(12, 15, 9)}}})

    assert list(series.series) == ["PM2.5"]
    assert series.series["PM2.5"] == (12.0, 15.0, 9.0)
    assert series.dates == (date(2025, 1, 10), date(2025, 1, 11), date(2025, 1, 12))

    chart = series.to_chart_data()
    assert len(chart["datasets"]) == 1
    assert chart["datasets"][0]["label"] == "PM2.5"
    assert chart["datasets"][0]["borderColor"] == "rgb(75, 192, 192)"
    assert chart["labels"] == ["Jan 10", "Jan 11", "Jan 12"]


def test_all_series_in_chart_order():
    daily = {
        "o3": days(30, 31),
        "uvi": days(1, 1, start=1),
        "pm10": days(20, 22),
        "pm25": days(10, 11),
    }

    series = format_daily_forecast(daily)

    assert list(series.series) == ["PM2.5", "PM10", "O3"]
    assert series.series["O3"] == (30.0, 31.0)


def test_dates_come_from_first_recognized_pollutant_in_payload_order():
    daily = {
        "uvi": days(1, 1, 1, start=1),
        "o3": days(30, 31, start=20),
        "pm25": days(10, 11, start=5),
    }

    series = format_daily_forecast(daily)

    assert series.dates == (date(2025, 1, 20), date(2025, 1, 21))


def test_values_keep_upstream_order():
    daily = {"pm10": days(5, 50, 20)}
    assert format_daily_forecast(daily).series["PM10"] == (5.0, 50.0, 20.0)


def test_daily_section_that_is_not_a_mapping():
    assert format_forecast({"forecast": {"daily": ["unexpected"]}}) is None
    assert format_daily_forecast("unexpected") is None
