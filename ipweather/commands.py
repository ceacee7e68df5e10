"""Process-wide entry points for callers that just want the weather."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from .cache import WeatherCache
from .config import WeatherConfig
from .entities import WeatherData
from .errors import WeatherError, WeatherFetchError
from .providers.amap_ip import IpLocationProvider
from .providers.amap_weather import LiveWeatherProvider
from .services.weather import WeatherService
from .transport import JsonClient, RequestConfig


logger = logging.getLogger(__name__)


def build_weather_service(config: WeatherConfig, cache: Optional[WeatherCache] = None) -> WeatherService:
    if config.uses_default_key:
        logger.warning("AMAP_API_KEY is not set, falling back to the placeholder key")
    client = JsonClient(request_config=RequestConfig(timeout=config.timeout))
    return WeatherService(
        locator=IpLocationProvider(client, base_url=config.base_url),
        weather_provider=LiveWeatherProvider(client, base_url=config.base_url),
        api_key=config.api_key,
        cache=cache,
    )


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    return build_weather_service(WeatherConfig.from_env())


def fetch_weather(service: WeatherService) -> WeatherData:
    """Run ``service`` and collapse any failure into :class:`WeatherFetchError`."""
    try:
        return service.get_weather()
    except WeatherError as exc:
        logger.error("Weather lookup failed: %s", exc)
        raise WeatherFetchError(str(exc)) from None


def failure_text(exc: WeatherFetchError) -> str:
    return f"weather fetch failed: {exc}"


def get_weather() -> WeatherData:
    try:
        service = get_weather_service()
    except ValueError as exc:
        raise WeatherFetchError(f"invalid configuration: {exc}") from None
    return fetch_weather(service)


def get_weather_text() -> str:
    """Like :func:`get_weather`, rendered as one line; never raises."""
    try:
        return get_weather().as_text()
    except WeatherFetchError as exc:
        return failure_text(exc)


__all__ = [
    "build_weather_service",
    "fetch_weather",
    "failure_text",
    "get_weather",
    "get_weather_service",
    "get_weather_text",
]
