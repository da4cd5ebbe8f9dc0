"""Weather Widget - Streamlit Frontend.

Run with: streamlit run frontend/app.py
"""

import logging

import streamlit as st
from dotenv import load_dotenv

from observability import init_tracing, tracing_enabled
from src.tools.shared_libraries.helpers import (
    format_forecast_time,
    format_temperature,
    icon_url,
)
from src.widget.weather_widget.config import MissingAPIKeyError, Settings
from src.widget.weather_widget.controller import WidgetController
from src.widget.weather_widget.state import Theme

load_dotenv()
logging.basicConfig(level=logging.INFO)

st.set_page_config(
    page_title="Weather",
    page_icon="🌤",
    layout="centered",
)

DARK_CSS = """
<style>
  .stApp { background-color: #0f172a; color: #e2e8f0; }
  .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label { color: #e2e8f0; }
</style>
"""

LIGHT_CSS = """
<style>
  .stApp { background-color: #f0f9ff; color: #0f172a; }
</style>
"""


@st.cache_resource
def _start_tracing() -> None:
    init_tracing(project_name="weather-widget")


def _get_controller() -> WidgetController:
    """Create the session's controller on first run."""
    if "controller" not in st.session_state:
        try:
            settings = Settings.from_env()
        except MissingAPIKeyError as e:
            st.error(str(e))
            st.stop()
        st.session_state.controller = WidgetController.from_settings(settings)
    return st.session_state.controller


if tracing_enabled():
    _start_tracing()

controller = _get_controller()
state = controller.state

# Queries are queued by widget callbacks and run below, under the spinner.
if "pending" not in st.session_state:
    st.session_state.pending = None


def _queue_search() -> None:
    state.city = st.session_state.city_input
    st.session_state.pending = ("fetch", None)


def _queue_city(name: str) -> None:
    st.session_state.pending = ("fetch", name)


def _queue_refresh() -> None:
    st.session_state.pending = ("refresh", None)


st.markdown(DARK_CSS if state.theme is Theme.DARK else LIGHT_CSS, unsafe_allow_html=True)

# Theme toggle
_, toggle_col = st.columns([4, 1])
with toggle_col:
    st.button(
        "☀ Light" if state.theme is Theme.DARK else "🌙 Dark",
        on_click=controller.toggle_theme,
        width="stretch",
    )

# Search
input_col, go_col = st.columns([4, 1])
with input_col:
    st.text_input(
        "City",
        key="city_input",
        placeholder="Search city",
        label_visibility="collapsed",
        on_change=_queue_search,
    )
with go_col:
    st.button("Go", on_click=_queue_search, width="stretch")

pending = st.session_state.pending
if pending is not None:
    st.session_state.pending = None
    action, name = pending
    with st.spinner("Loading..."):
        if action == "refresh":
            controller.refresh()
        else:
            controller.fetch(name)

# Recent searches
if state.recent:
    st.caption("Recent:")
    tag_cols = st.columns(len(state.recent))
    for i, city in enumerate(state.recent):
        with tag_cols[i]:
            st.button(city, key=f"recent_{i}", on_click=_queue_city, args=(city,))

if state.error:
    st.error(state.error)

# Current conditions
weather = state.weather
if weather is not None:
    with st.container(border=True):
        title_col, refresh_col = st.columns([4, 1])
        with title_col:
            st.subheader(weather.location)
        with refresh_col:
            st.button("🔄 Refresh", on_click=_queue_refresh, width="stretch")

        icon_col, temp_col = st.columns([1, 2])
        with icon_col:
            st.image(icon_url(weather.icon, large=True))
        with temp_col:
            st.markdown(f"## {format_temperature(weather.temperature)}")
            st.write(f"Feels like: {format_temperature(weather.feels_like)}")
            st.write(weather.description)

        humidity_col, wind_col = st.columns(2)
        humidity_col.metric("Humidity", f"{weather.humidity}%")
        wind_col.metric("Wind", f"{weather.wind_speed} m/s")

# Forecast
if state.forecast:
    st.caption("5-Day Forecast")
    forecast_cols = st.columns(len(state.forecast))
    for col, entry in zip(forecast_cols, state.forecast):
        with col:
            st.write(format_forecast_time(entry.timestamp))
            st.image(icon_url(entry.icon))
            st.write(format_temperature(entry.temperature))
