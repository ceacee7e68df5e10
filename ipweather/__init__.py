"""IP-located live weather backed by the AMap REST API."""
from __future__ import annotations

from .cache import WeatherCache
from .commands import get_weather, get_weather_text
from .config import WeatherConfig
from .entities import WeatherData
from .errors import WeatherError, WeatherFetchError
from .services.weather import WeatherService

__all__ = [
    "WeatherCache",
    "WeatherConfig",
    "WeatherData",
    "WeatherError",
    "WeatherFetchError",
    "WeatherService",
    "get_weather",
    "get_weather_text",
]
