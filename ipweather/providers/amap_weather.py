"""Live weather through AMap ``/v3/weather/weatherInfo``."""
from __future__ import annotations

from .base import AmapProvider, EmptyResult
from ..entities import WeatherData
from ..schemas import WeatherInfoResponse, WeatherLive


class LiveWeatherProvider(AmapProvider):
    stage = "Weather"
    path = "/v3/weather/weatherInfo"

    def resolve_weather(self, adcode: str, api_key: str) -> WeatherData:
        response = self.client.fetch_json(self._url(city=adcode, extensions="base", key=api_key), WeatherInfoResponse)
        self._ensure_ok(response)
        if not response.lives:
            self._log.warning("No live weather for region %s", adcode)
            raise EmptyResult(self.stage)
        # A region code may match several entries; only the first is used.
        return _normalize(response.lives[0])


def _normalize(live: WeatherLive) -> WeatherData:
    return WeatherData(
        province=live.province,
        city=live.city,
        weather=live.weather,
        temperature=live.temperature,
        humidity=live.humidity,
        update_time=live.reporttime,
    )


__all__ = ["LiveWeatherProvider"]
