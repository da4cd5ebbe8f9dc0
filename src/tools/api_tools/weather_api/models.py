"""Response models for the OpenWeatherMap current and forecast endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

DT_TXT_FORMAT = '%Y-%m-%d %H:%M:%S'


class CurrentConditions(BaseModel):
    """Current conditions for a resolved location, in metric units."""

    location: str = Field(description='Canonical location name resolved by the API')
    temperature: float
    feels_like: float
    humidity: int
    wind_speed: float
    description: str
    icon: str

    @field_validator('location')
    @classmethod
    def location_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('location name is blank')
        return value

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> 'CurrentConditions':
        """Build from a ``/weather`` response body.

        Raises:
            KeyError, IndexError, TypeError or pydantic.ValidationError when
            a consumed field is missing or has the wrong type.
        """
        weather = data['weather'][0]
        main = data['main']
        return cls(
            location=data['name'],
            temperature=main['temp'],
            feels_like=main['feels_like'],
            humidity=main['humidity'],
            wind_speed=data['wind']['speed'],
            description=weather['description'],
            icon=weather['icon'],
        )


class ForecastEntry(BaseModel):
    """One three-hour step of the forecast."""

    timestamp: datetime
    temperature: float
    icon: str
    description: str | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> 'ForecastEntry':
        """Build from one element of a ``/forecast`` response ``list``."""
        weather = item['weather'][0]
        return cls(
            timestamp=datetime.strptime(item['dt_txt'], DT_TXT_FORMAT),
            temperature=item['main']['temp'],
            icon=weather['icon'],
            description=weather.get('description'),
        )
