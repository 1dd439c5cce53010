import pytest

from weatherapp.api_client import GeocodingClient, WeatherClient
from weatherapp.storage import HistoryStore

GEO_URL = "https://geo.test/direct"
WEATHER_URL = "https://weather.test/weather"

REXBURG = [{"name": "Rexburg", "lat": 43.8, "lon": -111.79, "country": "US", "state": "Idaho"}]
CLEAR_SKY = {"main": {"temp": 22.5, "humidity": 40}, "weather": [{"description": "clear sky"}]}


@pytest.fixture
def geocoder():
    return GeocodingClient(api_key="test-key", base_url=GEO_URL)


@pytest.fixture
def weather_client():
    return WeatherClient(api_key="test-key", base_url=WEATHER_URL)


@pytest.fixture
def history_path(tmp_path):
    return tmp_path / "locations.txt"


@pytest.fixture
def history(history_path):
    return HistoryStore(str(history_path))


def scripted_input(*answers):
    """input() заменитель: отдаёт ответы по очереди и запоминает подсказки."""
    remaining = list(answers)
    prompts = []

    def _input(prompt=""):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    _input.prompts = prompts
    return _input
