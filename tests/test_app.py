"""Tests for the Flask routes (test client, OpenWeatherMap mocked)."""

import time

import pytest

import app as app_module
from config import OPENWEATHERMAP_URL
from models import WeatherData

from conftest import NASHVILLE_BODY

CALLBACK_URL = "http://client.test/results"


@pytest.fixture()
def client():
    app_module.cache.clear()
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c
    app_module.cache.clear()


@pytest.fixture()
def owm(requests_mock):
    return requests_mock.get(OPENWEATHERMAP_URL, json=NASHVILLE_BODY)


def _wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return False


def test_api_weather_returns_records(client, owm):
    resp = client.get("/api/weather?location=Nashville")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body[0]["name"] == "Nashville"
    assert WeatherData.from_dict(body[0]).temp == 72.5


def test_api_weather_second_call_served_from_cache(client, owm):
    client.get("/api/weather?location=Nashville")
    client.get("/api/weather?location=Nashville")
    assert owm.call_count == 1
    assert client.get("/health").get_json()["cached_locations"] == 1


def test_api_weather_requires_location(client):
    assert client.get("/api/weather").status_code == 400
    assert client.get("/api/weather?location=%20").status_code == 400


def test_api_weather_not_found_is_not_cached(client, requests_mock):
    m = requests_mock.get(OPENWEATHERMAP_URL, status_code=404,
                          json={"cod": "404", "message": "city not found"})
    for _ in range(2):
        resp = client.get("/api/weather?location=Atlantis")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "No weather found for Atlantis"
    assert m.call_count == 2


def test_index_renders_weather(client, owm):
    resp = client.get("/?location=Nashville")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Nashville, US" in html
    assert "72.5° F" in html


def test_index_renders_notice(client, requests_mock):
    requests_mock.get(OPENWEATHERMAP_URL, status_code=404)
    html = client.get("/?location=Atlantis").get_data(as_text=True)
    assert "No weather found for Atlantis" in html


def test_index_without_location(client):
    assert client.get("/").status_code == 200


def test_async_posts_results_to_callback(client, owm, requests_mock):
    cb = requests_mock.post(CALLBACK_URL, status_code=204)
    resp = client.post("/api/weather/async",
                       json={"location": "Nashville", "callback_url": CALLBACK_URL})
    assert resp.status_code == 202
    assert _wait_for(lambda: cb.called)
    payload = cb.last_request.json()
    assert payload["location"] == "Nashville"
    assert payload["results"][0]["name"] == "Nashville"


def test_async_requires_fields(client):
    assert client.post("/api/weather/async", json={"location": "Nashville"}).status_code == 400
    assert client.post("/api/weather/async", data="nope").status_code == 400
