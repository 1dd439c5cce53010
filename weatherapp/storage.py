import logging
import os
from typing import Iterator

from weatherapp.config import HISTORY_FILE
from weatherapp.models import ResolvedLocation

logger = logging.getLogger(__name__)


class HistoryStore:
    """История найденных городов: текстовый файл, только дописывание.

    Блокировок нет — рассчитано на один процесс за раз.
    """

    def __init__(self, path: str = HISTORY_FILE) -> None:
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def append(self, location: ResolvedLocation) -> bool:
        """Дописать город в файл. Ошибка записи — только предупреждение."""
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(location.to_history_line() + "\n")
        except OSError as e:
            logger.debug("Could not append to %s: %s", self.path, e)
            print(f"Error writing to file: {e}")
            return False
        return True

    def read_all(self) -> Iterator[str]:
        """Строки файла по порядку; нет файла — пустая последовательность."""
        if not self.exists():
            return
        try:
            # битые байты заменяются, остальные строки не теряются
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except OSError as e:
            logger.debug("Could not read %s: %s", self.path, e)
            print(f"Error reading from file: {e}")
