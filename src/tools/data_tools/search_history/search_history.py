"""Search history - recent successful city searches, persisted locally."""

import json
import logging
import sqlite3

from pydantic import TypeAdapter, ValidationError

from observability import trace_span

from .local_storage import LocalStorage
from .models import RECENT_CITIES_KEY


logger = logging.getLogger(__name__)

MAX_RECENT = 5

_CITY_LIST = TypeAdapter(list[str])


def parse_history(raw: str | None) -> list[str]:
    """Parse a persisted history value.

    Anything that is not a JSON list of strings yields an empty list.
    Duplicates are dropped (first occurrence wins) and the result is capped
    at ``MAX_RECENT`` entries.
    """
    if not raw:
        return []
    try:
        cities = _CITY_LIST.validate_json(raw, strict=True)
    except ValidationError:
        return []

    unique: list[str] = []
    for city in cities:
        if city not in unique:
            unique.append(city)
    return unique[:MAX_RECENT]


class SearchHistory:
    """Deduplicated, most-recent-first list of up to five city names."""

    def __init__(self, storage: LocalStorage, key: str = RECENT_CITIES_KEY):
        self.storage = storage
        self.key = key
        self._cities: list[str] = []

    def load(self) -> list[str]:
        """Read the persisted list, replacing the in-memory one.

        Never raises: missing, malformed or unreadable data loads as empty.
        """
        try:
            raw = self.storage.get_item(self.key)
        except sqlite3.Error as e:
            logger.warning(f'Could not read search history: {e}')
            raw = None
        self._cities = parse_history(raw)
        return self.list()

    def record(self, name: str) -> list[str]:
        """Move ``name`` to the front of the history and persist it.

        Args:
            name: A non-empty city name, compared by exact string match.

        Returns:
            The updated history.
        """
        if not name or not name.strip():
            raise ValueError('City name must not be blank.')

        self._cities = ([name] + [c for c in self._cities if c != name])[:MAX_RECENT]
        self._persist()
        return self.list()

    def clear(self) -> None:
        """Forget every recorded city."""
        self._cities = []
        self._persist()

    def list(self) -> list[str]:
        return list(self._cities)

    @trace_span('history.persist')
    def _persist(self) -> None:
        try:
            self.storage.set_item(self.key, json.dumps(self._cities))
        except sqlite3.Error as e:
            logger.warning(f'Could not persist search history: {e}')
