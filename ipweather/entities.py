from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class WeatherData:
    """Normalized live weather for the caller's location.

    All values are passed through as the upstream formats them: temperature in
    Celsius and humidity in percent, both as strings, and ``update_time`` as
    the upstream report time (``YYYY-MM-DD HH:MM:SS``, local to the region).
    """

    province: str
    city: str
    weather: str
    temperature: str
    humidity: str
    update_time: str

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)

    def as_text(self) -> str:
        return f"{self.province} {self.city} {self.weather} {self.temperature}℃"


__all__ = ["WeatherData"]
