from __future__ import annotations

import logging
from typing import Any, Optional

from ..cache import WeatherCache
from ..entities import WeatherData


class WeatherService:
    """Locate the caller, fetch its live weather and keep the result warm.

    Concurrent misses are not coalesced: each runs the whole chain and the
    last successful write wins.  The cache lock is only taken inside
    ``read``/``write``, never across an upstream call.
    """

    CACHE_TTL = WeatherCache.DEFAULT_TTL

    def __init__(
        self,
        *,
        locator: Any,
        weather_provider: Any,
        api_key: str,
        cache: Optional[WeatherCache] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.locator = locator
        self.weather_provider = weather_provider
        self.cache = cache or WeatherCache(ttl=self.CACHE_TTL)
        self._api_key = api_key
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def get_weather(self) -> WeatherData:
        cached = self.cache.read()
        if cached is not None:
            self._log.info("Returning cached weather for %s", cached.city)
            return cached

        self._log.info("Fetching weather")
        location = self.locator.resolve_location(self._api_key)
        result = self.weather_provider.resolve_weather(location.adcode, self._api_key)
        self.cache.write(result)
        self._log.info("Fetched weather: %s %s℃", result.city, result.temperature)
        return result


__all__ = ["WeatherService"]
