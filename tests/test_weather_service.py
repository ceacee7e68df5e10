from __future__ import annotations

import threading

import pytest

from ipweather.cache import WeatherCache
from ipweather.errors import WeatherError
from ipweather.providers.base import EmptyResult, MissingField, UpstreamRejected
from ipweather.services.weather import WeatherService
from ipweather.transport import NetworkError
from tests.fakes import LocationStub, WeatherStub, make_weather


def make_service(locator, weather_provider, cache=None) -> WeatherService:
    return WeatherService(locator=locator, weather_provider=weather_provider, api_key="test-key", cache=cache)


def test_weather_service_caches_results(clock) -> None:
    locator, provider = LocationStub(), WeatherStub()
    service = make_service(locator, provider, WeatherCache(time_func=clock))

    first = service.get_weather()
    clock.advance(60)
    second = service.get_weather()

    assert first == second == make_weather()
    assert locator.calls == 1
    assert provider.calls == 1


def test_weather_service_passes_region_code(clock) -> None:
    provider = WeatherStub()
    service = make_service(LocationStub(adcode="310000"), provider, WeatherCache(time_func=clock))

    service.get_weather()

    assert provider.adcodes == ["310000"]


def test_weather_service_refreshes_after_ttl(clock) -> None:
    locator = LocationStub()
    provider = WeatherStub()
    service = make_service(locator, provider, WeatherCache(time_func=clock))

    service.get_weather()
    clock.advance(WeatherService.CACHE_TTL + 1)
    provider.data = make_weather(temperature="25")
    refreshed = service.get_weather()

    assert refreshed.temperature == "25"
    assert locator.calls == 2
    assert service.cache.captured_at == WeatherService.CACHE_TTL + 1


def test_location_failure_short_circuits_chain() -> None:
    locator = LocationStub(error=UpstreamRejected("IP location", "INVALID_USER_KEY"))
    provider = WeatherStub()
    service = make_service(locator, provider)

    with pytest.raises(UpstreamRejected, match="INVALID_USER_KEY"):
        service.get_weather()

    assert provider.calls == 0


@pytest.mark.parametrize(
    "locator, provider",
    [
        (LocationStub(error=NetworkError("request to https://restapi.amap.com/v3/ip failed")), WeatherStub()),
        (LocationStub(error=MissingField("IP location", "adcode")), WeatherStub()),
        (LocationStub(), WeatherStub(error=EmptyResult("Weather"))),
        (LocationStub(), WeatherStub(error=UpstreamRejected("Weather", "DAILY_QUERY_OVER_LIMIT"))),
    ],
)
def test_failure_leaves_cached_value_alone(clock, locator, provider) -> None:
    cache = WeatherCache(time_func=clock)
    cached = make_weather(temperature="18")
    cache.write(cached)
    clock.advance(WeatherService.CACHE_TTL + 1)
    service = make_service(locator, provider, cache)

    with pytest.raises(WeatherError):
        service.get_weather()

    assert cache.captured_at == 0
    # rewind into the original window: the old entry must still be there
    clock.now = 5
    assert cache.read() is cached


def test_cache_hit_makes_no_upstream_calls(clock) -> None:
    cache = WeatherCache(time_func=clock)
    cached = make_weather()
    cache.write(cached)
    locator = LocationStub(error=NetworkError("unreachable"))
    provider = WeatherStub(error=EmptyResult("Weather"))
    service = make_service(locator, provider, cache)

    assert service.get_weather() is cached
    assert locator.calls == 0
    assert provider.calls == 0


def test_concurrent_misses_each_run_the_chain() -> None:
    # Both callers must be inside the location lookup at once, which only
    # happens if no lock is held across the upstream call.
    barrier = threading.Barrier(2, timeout=5)

    class BlockingLocator(LocationStub):
        def resolve_location(self, api_key: str):
            barrier.wait()
            return super().resolve_location(api_key)

    locator = BlockingLocator()
    provider = WeatherStub()
    service = make_service(locator, provider)
    results = []
    errors = []

    def call() -> None:
        try:
            results.append(service.get_weather())
        except Exception as exc:  # pragma: no cover - surfaced by the assert below
            errors.append(exc)

    threads = [threading.Thread(target=call) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(10)

    assert errors == []
    assert len(results) == 2
    assert locator.calls == 2
    assert provider.calls == 2
    assert service.cache.read() == make_weather()
