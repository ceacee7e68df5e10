"""Response schemas for the AMap v3 REST endpoints.

AMap answers HTTP 200 for almost everything and reports success through a
body-level ``status`` field (``"1"`` on success, ``"0"`` otherwise).  Fields it
cannot resolve, e.g. the city of a LAN or foreign address, come back as an
empty JSON array instead of a string; those are read as ``None``.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class UpstreamStatus(str, Enum):
    OK = "1"
    FAILED = "0"


def _optional_text(value: Any) -> Any:
    if value is None or value == [] or value == "":
        return None
    return value


class _AmapResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: UpstreamStatus
    info: str = ""
    infocode: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def status_as_enum(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        # anything but "1" is a rejection, whatever code AMap invents
        return UpstreamStatus.OK if value == UpstreamStatus.OK.value else UpstreamStatus.FAILED

    @property
    def ok(self) -> bool:
        return self.status is UpstreamStatus.OK


class IpLocationResponse(_AmapResponse):
    """Answer of ``/v3/ip``: where the caller's address resolves to."""

    province: Optional[str] = None
    city: Optional[str] = None
    adcode: Optional[str] = None
    rectangle: Optional[str] = None

    @field_validator("province", "city", "adcode", "rectangle", mode="before")
    @classmethod
    def empty_as_none(cls, value: Any) -> Any:
        return _optional_text(value)


class WeatherLive(BaseModel):
    """One live observation; ``reporttime`` is kept exactly as sent."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    province: str
    city: str
    adcode: str
    weather: str
    temperature: str
    winddirection: str = ""
    windpower: str = ""
    humidity: str
    reporttime: str
    temperature_float: Optional[str] = None
    humidity_float: Optional[str] = None


class WeatherInfoResponse(_AmapResponse):
    """Answer of ``/v3/weather/weatherInfo`` with ``extensions=base`` (live data only)."""

    count: Optional[str] = None
    lives: List[WeatherLive] = []


__all__ = [
    "IpLocationResponse",
    "UpstreamStatus",
    "WeatherInfoResponse",
    "WeatherLive",
]
