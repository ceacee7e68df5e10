from __future__ import annotations

import pytest

from ipweather import commands
from tests.fakes import TimeController


@pytest.fixture()
def clock() -> TimeController:
    return TimeController()


@pytest.fixture(autouse=True)
def fresh_services():
    commands.get_weather_service.cache_clear()
    yield
    commands.get_weather_service.cache_clear()
