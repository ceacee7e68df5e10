"""REST API views for the caller's live weather."""
from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ipweather.commands import get_weather, get_weather_text
from ipweather.errors import WeatherFetchError


class WeatherView(APIView):
    """Provide normalized weather data for wherever the server's address resolves."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the weather snapshot, or the failure message with 502."""
        try:
            data = get_weather()
        except WeatherFetchError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(data.as_dict(), status=status.HTTP_200_OK)


class WeatherTextView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the one-line summary; failures are reported in the text."""
        return Response({"text": get_weather_text()}, status=status.HTTP_200_OK)
