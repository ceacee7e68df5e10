from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Mapping, Optional, Type, TypeVar
from urllib.parse import urlsplit

import requests
from pydantic import BaseModel, ValidationError

from .errors import WeatherError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_PREVIEW = 200


class TransportError(WeatherError):
    """Base transport error."""


class NetworkError(TransportError):
    """Raised on connection, DNS, TLS or HTTP-level failures."""


class RequestTimeout(TransportError):
    """Raised when the upstream does not answer in time."""


class DecodeFailure(TransportError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, endpoint: str, detail: str, fragment: str) -> None:
        super().__init__(f"invalid response from {endpoint}: {detail} (body: {fragment!r})")
        self.endpoint = endpoint
        self.detail = detail
        self.fragment = fragment


@dataclass
class RequestConfig:
    timeout: float = 10.0


def endpoint_of(url: str) -> str:
    """Strip the query string; it carries the API key."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


class JsonClient:
    """Single-shot GET client that decodes bodies into pydantic models."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def fetch_json(
        self,
        url: str,
        model: Type[ModelT],
        headers: Optional[Mapping[str, str]] = None,
    ) -> ModelT:
        endpoint = endpoint_of(url)
        self._log.debug("GET %s", endpoint)
        started = time.monotonic()
        try:
            response = self.session.get(
                url,
                headers=dict(headers or {}),
                timeout=self.request_config.timeout,
            )
        except requests.Timeout as exc:
            self._log.error("Request to %s timed out", endpoint, exc_info=exc)
            raise RequestTimeout(f"request to {endpoint} timed out") from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", endpoint, exc_info=exc)
            raise NetworkError(f"request to {endpoint} failed: {exc.__class__.__name__}") from exc

        text = response.text
        self._log.debug(
            "%s answered %s in %.3fs: %s",
            endpoint,
            response.status_code,
            time.monotonic() - started,
            text[:BODY_PREVIEW],
        )
        if response.status_code >= 400:
            self._log.error("Upstream %s returned HTTP %s", endpoint, response.status_code)
            raise NetworkError(f"{endpoint} returned HTTP {response.status_code}")
        return self._decode(endpoint, text, model)

    def _decode(self, endpoint: str, text: str, model: Type[ModelT]) -> ModelT:
        try:
            payload = json.loads(text)
        except ValueError as exc:
            self._log.error("Failed to decode JSON from %s: %s", endpoint, exc)
            raise DecodeFailure(endpoint, str(exc), text[:BODY_PREVIEW]) from exc
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            detail = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
                for error in exc.errors()
            )
            self._log.error("Unexpected payload from %s: %s", endpoint, detail)
            raise DecodeFailure(endpoint, detail, text[:BODY_PREVIEW]) from exc


__all__ = [
    "DecodeFailure",
    "JsonClient",
    "NetworkError",
    "RequestConfig",
    "RequestTimeout",
    "TransportError",
    "endpoint_of",
]
