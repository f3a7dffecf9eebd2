"""OpenWeatherMap client for current conditions by location name."""

import logging

import requests

from config import OPENWEATHERMAP_URL, OPENWEATHERMAP_API_KEY, UNITS, REQUEST_TIMEOUT
from models import WeatherData

log = logging.getLogger(__name__)


def fetch_weather(location, api_key=None):
    """Fetch current weather for a location string.

    Returns a list of WeatherData (primary record first), or [] on any
    network or parse error. Nothing here raises.
    """
    params = {
        "units": UNITS,
        "q": location,
        "appid": api_key if api_key is not None else OPENWEATHERMAP_API_KEY,
    }
    try:
        resp = requests.get(OPENWEATHERMAP_URL, params=params, timeout=REQUEST_TIMEOUT)
        if resp.status_code == 404:
            log.info("OpenWeatherMap has no data for %s", location)
            return []
        resp.raise_for_status()
        raw = resp.json()
    except Exception:
        log.exception("Failed to fetch weather for %s", location)
        return []

    try:
        return parse_weather(raw)
    except Exception:
        log.exception("Failed to parse weather response for %s", location)
        return []


def parse_weather(raw):
    """Map an OpenWeatherMap current-weather body to WeatherData records."""
    if not isinstance(raw, dict) or "main" not in raw:
        return []
    main = raw.get("main") or {}
    wind = raw.get("wind") or {}
    sys = raw.get("sys") or {}
    conditions = raw.get("weather") or [{}]
    return [
        WeatherData(
            name=raw.get("name", ""),
            country=sys.get("country", ""),
            temp=main.get("temp", 0.0),
            humidity=main.get("humidity", 0),
            wind_speed=wind.get("speed", 0.0),
            wind_deg=wind.get("deg", 0.0),
            sunrise=sys.get("sunrise", 0),
            sunset=sys.get("sunset", 0),
            description=conditions[0].get("description", ""),
        )
    ]
