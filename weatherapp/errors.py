class WeatherAppError(Exception):
    """Базовая ошибка приложения."""


class TransportError(WeatherAppError):
    """Запрос не удалось отправить или соединение оборвалось."""


class RemoteError(WeatherAppError):
    """Сервер ответил статусом, отличным от 200."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Unexpected status code: {status_code}")


class MalformedResponse(WeatherAppError):
    """Ответ API не совпадает с ожидаемой структурой JSON."""
