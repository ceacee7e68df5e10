from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

from ..config import DEFAULT_BASE_URL
from ..errors import WeatherError
from ..transport import JsonClient


class OrchestrationError(WeatherError):
    """Base error for an upstream answer that cannot be used."""


class UpstreamRejected(OrchestrationError):
    """The upstream answered with a non-success status."""

    def __init__(self, stage: str, info: str) -> None:
        super().__init__(f"{stage} API returned an error: {info or 'unknown error'}")
        self.stage = stage
        self.info = info


class MissingField(OrchestrationError):
    """A field required for the next step is absent from a success answer."""

    def __init__(self, stage: str, name: str) -> None:
        super().__init__(f"{stage} response is missing {name}")
        self.stage = stage
        self.name = name


class EmptyResult(OrchestrationError):
    """A success answer carried no observations."""

    def __init__(self, stage: str) -> None:
        super().__init__(f"{stage} API returned no data")
        self.stage = stage


class AmapProvider:
    """Shared plumbing for the AMap v3 endpoints."""

    stage = "AMap"
    path = ""

    def __init__(self, client: Optional[JsonClient] = None, base_url: Optional[str] = None) -> None:
        self.client = client or JsonClient()
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._log = logging.getLogger(self.__class__.__name__)

    def _url(self, **params: str) -> str:
        return f"{self.base_url}{self.path}?{urlencode(params)}"

    def _ensure_ok(self, response) -> None:
        if not response.ok:
            self._log.warning("%s rejected the request: %s (%s)", self.stage, response.info, response.infocode)
            raise UpstreamRejected(self.stage, response.info)


__all__ = [
    "AmapProvider",
    "EmptyResult",
    "MissingField",
    "OrchestrationError",
    "UpstreamRejected",
]
