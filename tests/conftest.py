"""Shared fixtures: a controllable millisecond clock and sample records."""

import pytest

from cache import WeatherCache
from models import WeatherData

NASHVILLE_BODY = {
    "coord": {"lon": -86.78, "lat": 36.17},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {"temp": 72.5, "pressure": 1016, "humidity": 40, "temp_min": 70.0, "temp_max": 75.0},
    "wind": {"speed": 5.8, "deg": 180},
    "dt": 1700000000,
    "sys": {"country": "US", "sunrise": 1699963200, "sunset": 1700000400},
    "id": 4644585,
    "name": "Nashville",
    "cod": 200,
}


class FakeClock:
    """Controllable wall clock in milliseconds."""

    def __init__(self, start=0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms

    def set(self, ms):
        self.now = ms


def make_record(name="Nashville", temp=72.5):
    return WeatherData(name=name, country="US", temp=temp, humidity=40, description="clear sky")


class FakeFetcher:
    """Stands in for fetch_weather; counts calls and returns canned results."""

    def __init__(self, results=None):
        self.results = results if results is not None else {}
        self.calls = []

    def __call__(self, location):
        self.calls.append(location)
        return list(self.results.get(location, []))


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def cache(clock):
    return WeatherCache(clock=clock)
