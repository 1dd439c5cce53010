import logging
from typing import Callable, Optional

from weatherapp.api_client import GeocodingClient, WeatherClient
from weatherapp.config import Settings, load_settings
from weatherapp.errors import WeatherAppError, RemoteError
from weatherapp.logging_config import setup_logging
from weatherapp.models import ResolvedLocation, UnitSystem, WeatherReading
from weatherapp.storage import HistoryStore

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 59


def display_history(history: HistoryStore) -> None:
    """Показать ранее найденные города."""
    print("\n" + SEPARATOR)
    if not history.exists():
        print("No previous history found.")
        print(SEPARATOR)
        return

    print("Location History:")
    for line in history.read_all():
        print(f"\t{line}")
    print(SEPARATOR)


def display_location(location: ResolvedLocation) -> None:
    print("\n" + SEPARATOR)
    print(f"\t{location.name}, {location.region}, {location.country_code}")
    print(f"\t{location.latitude}, {location.longitude}")


def display_current_weather(reading: WeatherReading) -> None:
    print(f"\n\tTemperature: {reading.temperature} {reading.symbol}")
    print(f"\tConditions: {reading.description}")
    print(f"\tHumidity: {reading.humidity}%")
    print(SEPARATOR)


class WorkflowController:
    """Один проход: история -> город -> единицы -> координаты -> погода."""

    def __init__(
        self,
        geocoder: GeocodingClient,
        weather: WeatherClient,
        history: HistoryStore,
        input_func: Callable[[str], str] = input,
    ) -> None:
        self.geocoder = geocoder
        self.weather = weather
        self.history = history
        self.input = input_func

    def ask_units(self) -> UnitSystem:
        choice = self.input("Choose units (C = Celsius, F = Fahrenheit, K = Kelvin): ")
        units = UnitSystem.from_letter(choice)
        if units is None:
            print("Invalid unit, defaulting to Celsius.")
            return UnitSystem.METRIC
        return units

    def resolve(self, query: str) -> Optional[ResolvedLocation]:
        try:
            location = self.geocoder.resolve(query)
        except RemoteError as e:
            print(f"Error fetching coordinates. Status code: {e.status_code}")
            return None
        if location is None:
            print("No results found.")
        return location

    def show_weather(self, location: ResolvedLocation, units: UnitSystem) -> None:
        try:
            reading = self.weather.fetch_current(location.latitude, location.longitude, units)
        except RemoteError as e:
            print(f"Error fetching weather data. Status code: {e.status_code}")
            return
        display_current_weather(reading)

    def run(self) -> None:
        try:
            menu_choice = self.input("Load location history? (y/n) ").strip()
            if menu_choice.lower() == "y":
                display_history(self.history)

            city = self.input("\nEnter city (e.g., 'Rexburg,ID,US' or 'London,GB'): ").strip()
            units = self.ask_units()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        try:
            location = self.resolve(city)
            if location is None:
                print("Could not find that city. Try again.")
                return

            display_location(location)
            # сохраняем даже если погоду потом получить не удастся
            self.history.append(location)
            self.show_weather(location, units)
        except WeatherAppError as e:
            logger.debug("Lookup for %r failed", city, exc_info=True)
            print(f"An error occurred: {e}")


def build_controller(settings: Settings) -> WorkflowController:
    geocoder = GeocodingClient(settings.api_key, settings.geo_url, settings.timeout)
    weather = WeatherClient(settings.api_key, settings.weather_url, settings.timeout)
    return WorkflowController(geocoder, weather, HistoryStore(settings.history_file))


def main() -> int:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    if not settings.api_key:
        print("Error: API_KEY environment variable is not set.")
        return 1

    build_controller(settings).run()
    return 0
