"""Environment-driven configuration for the AMap lookups."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

# Placeholder credential used when AMAP_API_KEY is not set.  AMap rejects it
# with INVALID_USER_KEY, so deployments must provide a real key.
DEFAULT_API_KEY = "your-amap-web-service-key"
DEFAULT_BASE_URL = "https://restapi.amap.com"
DEFAULT_TIMEOUT = 10.0


def env(name: str, default: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Fetch an AMAP_* environment variable, treating blank values as unset.

    Django keys go through ``backend.settings.env``, which keeps blanks and
    raises when a required key is missing.
    """

    source = os.environ if environ is None else environ
    value = source.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class WeatherConfig:
    api_key: str = field(default=DEFAULT_API_KEY, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WeatherConfig":
        timeout = env("AMAP_TIMEOUT", environ=environ)
        try:
            timeout_value = float(timeout) if timeout is not None else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ValueError(f"AMAP_TIMEOUT must be a number, got {timeout!r}") from exc
        return cls(
            api_key=env("AMAP_API_KEY", DEFAULT_API_KEY, environ=environ),
            base_url=env("AMAP_BASE_URL", DEFAULT_BASE_URL, environ=environ).rstrip("/"),
            timeout=timeout_value,
        )

    @property
    def uses_default_key(self) -> bool:
        return self.api_key == DEFAULT_API_KEY


__all__ = ["DEFAULT_API_KEY", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT", "WeatherConfig", "env"]
