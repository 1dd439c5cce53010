from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UnitSystem(Enum):
    METRIC = "C"
    IMPERIAL = "F"
    SCIENTIFIC = "K"

    @classmethod
    def from_letter(cls, letter: str) -> Optional["UnitSystem"]:
        """Буква C/F/K (без учёта регистра) -> система единиц, иначе None."""
        letter = (letter or "").strip().upper()
        for unit in cls:
            if unit.value == letter:
                return unit
        return None

    @property
    def api_value(self) -> str:
        return _UNIT_TABLE[self][0]

    @property
    def symbol(self) -> str:
        return _UNIT_TABLE[self][1]


# единицы -> (значение параметра units для API, символ для вывода)
# пустая строка — кельвины, значение API по умолчанию
_UNIT_TABLE = {
    UnitSystem.METRIC: ("metric", "°C"),
    UnitSystem.IMPERIAL: ("imperial", "°F"),
    UnitSystem.SCIENTIFIC: ("", "K"),
}


@dataclass(frozen=True)
class ResolvedLocation:
    name: str
    country_code: str
    latitude: float
    longitude: float
    region: str = "N/A"

    def to_history_line(self) -> str:
        """Строка для файла истории: name, region, country, lat, lon."""
        return ", ".join(
            str(field)
            for field in (self.name, self.region, self.country_code, self.latitude, self.longitude)
        )


@dataclass(frozen=True)
class WeatherReading:
    temperature: float
    humidity: int
    description: str
    units: UnitSystem = UnitSystem.METRIC

    @property
    def symbol(self) -> str:
        return self.units.symbol
