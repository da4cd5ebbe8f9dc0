"""Shared helper functions for rendering weather data."""

from datetime import datetime

from src.tools.api_tools.weather_api.models import CurrentConditions, ForecastEntry

ICON_BASE_URL = 'https://openweathermap.org/img/wn'


def format_temperature(temp: float, units: str = 'metric') -> str:
    """Format temperature with unit symbol.

    Args:
        temp: Temperature value.
        units: "metric" for Celsius, "imperial" for Fahrenheit.

    Returns:
        Formatted temperature string.
    """
    unit_symbol = '°C' if units == 'metric' else '°F'
    return f'{temp:.1f}{unit_symbol}'


def format_forecast_time(timestamp: datetime) -> str:
    """Short weekday plus 24h time, e.g. ``Mon 12:00``."""
    return timestamp.strftime('%a %H:%M')


def icon_url(icon: str, large: bool = False) -> str:
    """URL of the OpenWeatherMap icon image for an icon id."""
    suffix = '@2x' if large else ''
    return f'{ICON_BASE_URL}/{icon}{suffix}.png'


def format_weather_summary(weather: CurrentConditions) -> str:
    """Format current conditions into a one-line summary.

    Args:
        weather: Current conditions in metric units.

    Returns:
        Formatted weather summary string.
    """
    return (
        f'{weather.location}: {format_temperature(weather.temperature)} '
        f'(feels like {format_temperature(weather.feels_like)}), '
        f'{weather.description}, '
        f'Humidity: {weather.humidity}%, '
        f'Wind: {weather.wind_speed} m/s'
    )


def format_forecast_line(entry: ForecastEntry) -> str:
    """Format one forecast step as ``Mon 12:00  14.2°C  light rain``."""
    parts = [format_forecast_time(entry.timestamp), format_temperature(entry.temperature)]
    if entry.description:
        parts.append(entry.description)
    return '  '.join(parts)
