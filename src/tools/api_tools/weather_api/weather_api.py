"""Weather API client - OpenWeatherMap current conditions and forecast."""

import logging

import httpx
from pydantic import ValidationError

from observability import trace_tool

from .models import CurrentConditions, ForecastEntry


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.openweathermap.org/data/2.5'
FORECAST_LIMIT = 5


class WeatherAPIError(Exception):
    """Any failure to obtain a usable response from the weather API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    """Thin client over the ``/weather`` and ``/forecast`` endpoints.

    Both endpoints are queried by city name with the same credential and
    ``units=metric``. Every failure cause is raised as ``WeatherAPIError``.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        units: str = 'metric',
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.units = units
        self._client = http_client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def _get(self, endpoint: str, city: str) -> dict:
        try:
            response = self._client.get(
                f'{self.base_url}/{endpoint}',
                params={
                    'q': city,
                    'appid': self.api_key,
                    'units': self.units,
                },
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                raise WeatherAPIError(f'City "{city}" not found.', status) from e
            raise WeatherAPIError(f'API request failed: {e}', status) from e
        except httpx.HTTPError as e:
            raise WeatherAPIError(f'API request failed: {e}') from e
        except ValueError as e:
            raise WeatherAPIError('Invalid JSON response from API.') from e

        if not isinstance(data, dict):
            raise WeatherAPIError('Unexpected response shape from API.')
        return data

    @trace_tool('api.get_current_weather')
    def get_current_weather(self, city: str) -> CurrentConditions:
        """Get current conditions for a city.

        Args:
            city: The city name, passed through verbatim as ``q``.

        Returns:
            The parsed conditions, including the canonical location name.

        Raises:
            WeatherAPIError: The request failed or the payload was malformed.
        """
        data = self._get('weather', city)
        try:
            return CurrentConditions.from_api(data)
        except (KeyError, IndexError, TypeError, ValidationError) as e:
            raise WeatherAPIError(f'Malformed current weather payload: {e}') from e

    @trace_tool('api.get_weather_forecast')
    def get_forecast(self, city: str, limit: int = FORECAST_LIMIT) -> list[ForecastEntry]:
        """Get the first ``limit`` three-hour forecast steps for a city.

        Args:
            city: The city name, passed through verbatim as ``q``.
            limit: Number of leading entries to keep. Defaults to 5.

        Returns:
            Forecast entries in the order the API returned them.

        Raises:
            WeatherAPIError: The request failed or the payload was malformed.
        """
        data = self._get('forecast', city)
        try:
            return [ForecastEntry.from_api(item) for item in data['list'][:limit]]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise WeatherAPIError(f'Malformed forecast payload: {e}') from e
