"""Unit tests for the OpenWeatherMap client."""

from datetime import datetime

import httpx
import pytest

from src.tools.api_tools.weather_api.weather_api import (
    OpenWeatherClient,
    WeatherAPIError,
)


CURRENT_PAYLOAD = {
    'name': 'Seoul',
    'sys': {'country': 'KR'},
    'main': {'temp': 20.5, 'feels_like': 19.0, 'humidity': 65},
    'weather': [{'description': 'clear sky', 'icon': '01d'}],
    'wind': {'speed': 3.5},
}


def forecast_payload(count: int) -> dict:
    return {
        'city': {'name': 'Seoul', 'country': 'KR'},
        'list': [
            {
                'dt_txt': f'2024-01-01 {hour:02d}:00:00',
                'main': {'temp': 10.0 + hour},
                'weather': [{'description': 'cloudy', 'icon': '04d'}],
            }
            for hour in range(0, 3 * count, 3)
        ],
    }


def make_client(handler) -> OpenWeatherClient:
    return OpenWeatherClient(
        api_key='test_api_key',
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


class TestGetCurrentWeather:
    """Tests for OpenWeatherClient.get_current_weather."""

    def test_successful_weather_query(self):
        """Test successful weather API response."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=CURRENT_PAYLOAD)

        result = make_client(handler).get_current_weather('seoul')

        assert result.location == 'Seoul'
        assert result.temperature == 20.5
        assert result.feels_like == 19.0
        assert result.humidity == 65
        assert result.wind_speed == 3.5
        assert result.description == 'clear sky'
        assert result.icon == '01d'

        assert len(requests) == 1
        assert requests[0].url.path.endswith('/weather')
        params = requests[0].url.params
        assert params['q'] == 'seoul'
        assert params['appid'] == 'test_api_key'
        assert params['units'] == 'metric'

    def test_city_not_found(self):
        """Test that a 404 becomes a WeatherAPIError with the status code."""
        client = make_client(lambda request: httpx.Response(404, json={'message': 'city not found'}))

        with pytest.raises(WeatherAPIError) as exc_info:
            client.get_current_weather('Atlantis')

        assert exc_info.value.status_code == 404

    def test_network_error(self):
        """Test that transport failures become WeatherAPIError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('connection refused', request=request)

        with pytest.raises(WeatherAPIError) as exc_info:
            make_client(handler).get_current_weather('Seoul')

        assert exc_info.value.status_code is None

    def test_invalid_json(self):
        """Test that a non-JSON body becomes WeatherAPIError."""
        client = make_client(lambda request: httpx.Response(200, text='<html>oops</html>'))

        with pytest.raises(WeatherAPIError):
            client.get_current_weather('Seoul')

    def test_missing_fields(self):
        """Test that a payload without consumed fields is rejected."""
        client = make_client(lambda request: httpx.Response(200, json={'name': 'Seoul', 'weather': []}))

        with pytest.raises(WeatherAPIError):
            client.get_current_weather('Seoul')

    @pytest.mark.parametrize('name', ['', '   '])
    def test_blank_location_name(self, name):
        """Test that a blank resolved city name is treated as malformed."""
        payload = dict(CURRENT_PAYLOAD, name=name)
        client = make_client(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(WeatherAPIError):
            client.get_current_weather('Seoul')


class TestGetWeatherForecast:
    """Tests for OpenWeatherClient.get_forecast."""

    def test_keeps_first_five_entries_in_order(self):
        """Test that only the leading five steps are kept."""
        client = make_client(lambda request: httpx.Response(200, json=forecast_payload(8)))

        result = client.get_forecast('Tokyo')

        assert len(result) == 5
        assert [entry.timestamp.hour for entry in result] == [0, 3, 6, 9, 12]
        assert result[0].timestamp == datetime(2024, 1, 1, 0, 0)
        assert result[0].temperature == 10.0
        assert result[0].icon == '04d'
        assert result[0].description == 'cloudy'

    def test_fewer_entries_than_limit(self):
        """Test that a short forecast list is returned as-is."""
        client = make_client(lambda request: httpx.Response(200, json=forecast_payload(2)))

        assert len(client.get_forecast('Tokyo')) == 2

    def test_request_parameters(self):
        """Test that the forecast endpoint gets the same query parameters."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=forecast_payload(1))

        make_client(handler).get_forecast('Tokyo')

        assert requests[0].url.path.endswith('/forecast')
        assert requests[0].url.params['q'] == 'Tokyo'
        assert requests[0].url.params['units'] == 'metric'

    def test_malformed_timestamp(self):
        """Test that an unparseable dt_txt is rejected."""
        payload = forecast_payload(1)
        payload['list'][0]['dt_txt'] = 'tomorrow'
        client = make_client(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(WeatherAPIError):
            client.get_forecast('Tokyo')

    def test_server_error(self):
        """Test that a 5xx becomes WeatherAPIError."""
        client = make_client(lambda request: httpx.Response(500))

        with pytest.raises(WeatherAPIError) as exc_info:
            client.get_forecast('Tokyo')

        assert exc_info.value.status_code == 500
