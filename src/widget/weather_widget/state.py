"""Widget state owned by the controller."""

from dataclasses import dataclass, field
from enum import Enum

from src.tools.api_tools.weather_api.models import CurrentConditions, ForecastEntry


class QueryStatus(str, Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    SUCCESS = 'success'
    ERROR = 'error'


class Theme(str, Enum):
    LIGHT = 'light'
    DARK = 'dark'


@dataclass
class WidgetState:
    """Everything the page renders.

    ``error`` is non-empty only while ``status`` is ERROR.
    """

    city: str = ''
    weather: CurrentConditions | None = None
    forecast: list[ForecastEntry] = field(default_factory=list)
    status: QueryStatus = QueryStatus.IDLE
    error: str = ''
    recent: list[str] = field(default_factory=list)
    theme: Theme = Theme.LIGHT

    @property
    def loading(self) -> bool:
        return self.status is QueryStatus.LOADING
