import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

GEO_URL = "http://api.openweathermap.org/geo/1.0/direct"
WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
HISTORY_FILE = "locations.txt"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    geo_url: str = GEO_URL
    weather_url: str = WEATHER_URL
    history_file: str = HISTORY_FILE
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("REQUEST_TIMEOUT=%r is not a number, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("REQUEST_TIMEOUT=%r must be positive, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Прочитать настройки из .env и переменных окружения."""
    load_dotenv(dotenv_path)
    return Settings(
        api_key=os.getenv("API_KEY") or None,
        geo_url=os.getenv("GEO_API_URL", GEO_URL),
        weather_url=os.getenv("WEATHER_API_URL", WEATHER_URL),
        history_file=os.getenv("HISTORY_FILE", HISTORY_FILE),
        timeout=_parse_timeout(os.getenv("REQUEST_TIMEOUT")),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        log_file=os.getenv("LOG_FILE") or None,
    )
