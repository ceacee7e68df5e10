from __future__ import annotations


class WeatherError(RuntimeError):
    """Base class for every failure inside the weather lookup chain."""


class WeatherFetchError(RuntimeError):
    """Boundary error: carries nothing but the human-readable message."""


__all__ = ["WeatherError", "WeatherFetchError"]
