"""Concrete repository implementations."""

from .csv_weather_repository import CsvWeatherRepository

__all__ = [
    "CsvWeatherRepository",
]
