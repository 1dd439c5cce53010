"""Консольное приложение: координаты города и текущая погода через OpenWeatherMap."""

__version__ = "1.0.0"
