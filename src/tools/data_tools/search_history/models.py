"""SQLite schema for the widget's local key/value storage."""

# A single table mirrors the browser local-storage API: string keys mapped to
# string (JSON) values, each write replacing the previous value.
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS local_storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""

RECENT_CITIES_KEY = 'recentCities'
