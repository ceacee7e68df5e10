"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import WeatherTextView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    path("weather/text", WeatherTextView.as_view(), name="weather-text"),
]
