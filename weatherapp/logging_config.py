import logging
import logging.handlers
from typing import Optional


def setup_logging(log_level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Настроить корневой логгер: stderr и, по желанию, файл с ротацией."""
    logger = logging.getLogger()
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-15s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        # 1 МБ, 3 файла
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.debug("Logging initialised at %s", log_level.upper())
