import logging
from typing import Optional, Dict, Any

import requests

from weatherapp.config import GEO_URL, WEATHER_URL, DEFAULT_TIMEOUT
from weatherapp.errors import TransportError, RemoteError, MalformedResponse
from weatherapp.models import ResolvedLocation, UnitSystem, WeatherReading

logger = logging.getLogger(__name__)


def _redact(text: str, secret: Optional[str]) -> str:
    if not secret:
        return text
    return text.replace(secret, "***")


def _get_json(
    session: Optional[requests.Session],
    url: str,
    params: Dict[str, Any],
    timeout: float,
) -> Any:
    """Один GET-запрос без ретраев; ошибки переводятся в исключения приложения."""
    http = session or requests
    try:
        response = http.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        # текст исключения содержит полный URL вместе с ключом
        logger.debug("Request to %s failed: %s", url, type(e).__name__)
        raise TransportError(_redact(str(e), params.get("appid"))) from e

    if response.status_code != 200:
        logger.debug("%s answered with status %s", url, response.status_code)
        raise RemoteError(response.status_code)

    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponse(f"Response from {url} is not valid JSON") from e


class GeocodingClient:
    """Поиск координат города через OpenWeatherMap Geocoding API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = GEO_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session

    def resolve(self, query: str) -> Optional[ResolvedLocation]:
        """Первый (лучший) вариант города или None, если ничего не найдено."""
        params = {"q": query, "limit": 1, "appid": self.api_key}
        data = _get_json(self.session, self.base_url, params, self.timeout)

        if not isinstance(data, list):
            raise MalformedResponse("Geocoding response is not a list")
        if not data:
            logger.info("No geocoding results for %r", query)
            return None

        item = data[0]
        try:
            state = item.get("state")
            location = ResolvedLocation(
                name=str(item["name"]),
                country_code=str(item["country"]),
                latitude=float(item["lat"]),
                longitude=float(item["lon"]),
                region="N/A" if state is None else str(state),
            )
        except KeyError as e:
            raise MalformedResponse(f"Geocoding response is missing field {e}") from e
        except (AttributeError, TypeError, ValueError) as e:
            raise MalformedResponse(f"Unexpected geocoding response format: {e}") from e

        logger.debug("Resolved %r to %s", query, location)
        return location


class WeatherClient:
    """Текущая погода по координатам через OpenWeatherMap Current Weather API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHER_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session

    def fetch_current(self, latitude: float, longitude: float, units: UnitSystem) -> WeatherReading:
        params = {
            "lat": latitude,
            "lon": longitude,
            "units": units.api_value,
            "appid": self.api_key,
        }
        data = _get_json(self.session, self.base_url, params, self.timeout)

        try:
            main = data["main"]
            weather = data["weather"]
            if not weather:
                raise MalformedResponse("Weather response has an empty 'weather' list")
            return WeatherReading(
                temperature=float(main["temp"]),
                humidity=int(main["humidity"]),
                description=str(weather[0]["description"]),
                units=units,
            )
        except KeyError as e:
            raise MalformedResponse(f"Weather response is missing field {e}") from e
        except (IndexError, TypeError, ValueError) as e:
            raise MalformedResponse(f"Unexpected weather response format: {e}") from e
