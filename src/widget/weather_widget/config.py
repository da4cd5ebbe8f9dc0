"""Widget configuration read from the environment."""

import os
from dataclasses import dataclass

from src.tools.api_tools.weather_api.weather_api import DEFAULT_BASE_URL


class MissingAPIKeyError(Exception):
    """Exception for missing API key."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    data_dir: str = './data'

    @classmethod
    def from_env(cls, data_dir: str | None = None) -> 'Settings':
        """Build settings from environment variables.

        Call ``load_dotenv()`` first so a ``.env`` file is honoured.

        Raises:
            MissingAPIKeyError: OPENWEATHER_API_KEY is not set.
        """
        api_key = os.getenv('OPENWEATHER_API_KEY')
        if not api_key:
            raise MissingAPIKeyError(
                'OPENWEATHER_API_KEY environment variable not set.'
            )
        return cls(
            api_key=api_key,
            base_url=os.getenv('OPENWEATHER_BASE_URL', DEFAULT_BASE_URL),
            timeout=float(os.getenv('OPENWEATHER_TIMEOUT', '10.0')),
            data_dir=data_dir or os.getenv('WEATHER_WIDGET_DATA_DIR', './data'),
        )
