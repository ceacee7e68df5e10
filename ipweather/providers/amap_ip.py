"""IP geolocation through AMap ``/v3/ip``."""
from __future__ import annotations

from .base import AmapProvider, MissingField
from ..schemas import IpLocationResponse


class IpLocationProvider(AmapProvider):
    """Resolve the caller's public address to an AMap region code.

    No ``ip`` parameter is sent: AMap locates whichever address the request
    arrives from.
    """

    stage = "IP location"
    path = "/v3/ip"

    def resolve_location(self, api_key: str) -> IpLocationResponse:
        location = self.client.fetch_json(self._url(key=api_key), IpLocationResponse)
        self._ensure_ok(location)
        if not location.adcode:
            self._log.warning("IP location succeeded without a region code: %s", location.info)
            raise MissingField(self.stage, "adcode")
        self._log.debug("Resolved %s %s (%s)", location.province, location.city, location.adcode)
        return location


__all__ = ["IpLocationProvider"]
