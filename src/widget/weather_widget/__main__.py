"""Weather Widget CLI - look up weather and manage recent searches."""

import logging
import sys

import click
from dotenv import load_dotenv

from observability import init_tracing, tracing_enabled
from src.tools.data_tools.search_history.local_storage import LocalStorage
from src.tools.data_tools.search_history.search_history import SearchHistory
from src.tools.shared_libraries.helpers import (
    format_forecast_line,
    format_weather_summary,
)

from .config import MissingAPIKeyError, Settings
from .controller import WidgetController


logger = logging.getLogger(__name__)


@click.group()
@click.option('--data-dir', 'data_dir', default=None, help='Directory for the history database')
@click.option('--trace/--no-trace', 'trace', default=None, help='Send spans to Phoenix')
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, trace: bool | None):
    """Look up current weather and a short forecast for a city."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    if trace or (trace is None and tracing_enabled()):
        init_tracing(project_name='weather-widget')

    ctx.ensure_object(dict)
    ctx.obj['data_dir'] = data_dir


@main.command()
@click.argument('city')
@click.pass_context
def lookup(ctx: click.Context, city: str):
    """Show current conditions and forecast for CITY."""
    try:
        settings = Settings.from_env(data_dir=ctx.obj['data_dir'])
    except MissingAPIKeyError as e:
        logger.error(f'Error: {e}')
        sys.exit(1)

    controller = WidgetController.from_settings(settings)
    try:
        ok = controller.fetch(city)
    finally:
        controller.client.close()

    state = controller.state
    if not ok:
        click.echo(state.error or 'Please enter a city name.', err=True)
        sys.exit(1)

    click.echo(format_weather_summary(state.weather))
    for entry in state.forecast:
        click.echo(f'  {format_forecast_line(entry)}')


@main.command()
@click.pass_context
def history(ctx: click.Context):
    """List recently searched cities, most recent first."""
    recent = SearchHistory(LocalStorage(ctx.obj['data_dir'])).load()
    if not recent:
        click.echo('No recent searches.')
        return
    for city in recent:
        click.echo(city)


@main.command(name='clear-history')
@click.pass_context
def clear_history(ctx: click.Context):
    """Forget all recently searched cities."""
    SearchHistory(LocalStorage(ctx.obj['data_dir'])).clear()
    click.echo('Search history cleared.')


if __name__ == '__main__':
    main()
