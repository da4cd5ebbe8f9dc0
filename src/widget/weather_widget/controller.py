"""Weather widget controller - the search, fetch and history flow."""

import logging

from observability import trace_span
from src.tools.api_tools.weather_api.models import CurrentConditions, ForecastEntry
from src.tools.api_tools.weather_api.weather_api import (
    FORECAST_LIMIT,
    OpenWeatherClient,
    WeatherAPIError,
)
from src.tools.data_tools.search_history.local_storage import LocalStorage
from src.tools.data_tools.search_history.search_history import SearchHistory

from .config import Settings
from .state import QueryStatus, Theme, WidgetState


logger = logging.getLogger(__name__)

QUERY_FAILED_MESSAGE = 'City not found or API error.'


class WidgetController:
    """Owns the widget state and is the only code that mutates it.

    Calls are synchronous; if two fetches overlap the one that finishes last
    decides what is displayed.
    """

    def __init__(self, client: OpenWeatherClient, history: SearchHistory):
        self.client = client
        self.history = history
        self.state = WidgetState(recent=history.load())

    @classmethod
    def from_settings(cls, settings: Settings) -> 'WidgetController':
        client = OpenWeatherClient(
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )
        history = SearchHistory(LocalStorage(settings.data_dir))
        return cls(client, history)

    @trace_span('widget.fetch')
    def fetch(self, name: str | None = None) -> bool:
        """Look up current conditions and forecast for a city.

        Args:
            name: City to query. Defaults to the current input text.

        Returns:
            True if both requests succeeded and the state now shows the
            result. False on failure, or when the name is blank, in which
            case nothing is changed.
        """
        city = self.state.city if name is None else name
        if not city or not city.strip():
            return False

        state = self.state
        state.status = QueryStatus.LOADING
        state.error = ''
        logger.info(f'Fetching weather for {city!r}')
        try:
            weather = self.client.get_current_weather(city)
            forecast = self.client.get_forecast(city, limit=FORECAST_LIMIT)
            self._show(weather, forecast)
            return True
        except WeatherAPIError as e:
            logger.warning(f'Weather query for {city!r} failed: {e}')
            self._fail()
            return False
        finally:
            # Only an unexpected exception can leave the query in flight.
            if state.status is QueryStatus.LOADING:
                self._fail()

    def refresh(self) -> bool:
        """Re-run the query for the location currently on display."""
        if self.state.weather is None:
            return False
        return self.fetch(self.state.weather.location)

    def toggle_theme(self) -> Theme:
        self.state.theme = Theme.LIGHT if self.state.theme is Theme.DARK else Theme.DARK
        return self.state.theme

    def clear_history(self) -> None:
        self.history.clear()
        self.state.recent = self.history.list()

    def _show(self, weather: CurrentConditions, forecast: list[ForecastEntry]) -> None:
        state = self.state
        state.weather = weather
        state.forecast = forecast
        state.recent = self.history.record(weather.location)
        state.error = ''
        state.status = QueryStatus.SUCCESS
        logger.info(f'Weather for {weather.location!r} loaded')

    def _fail(self) -> None:
        state = self.state
        state.weather = None
        state.forecast = []
        state.error = QUERY_FAILED_MESSAGE
        state.status = QueryStatus.ERROR
