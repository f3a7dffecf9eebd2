"""Constants and helpers for the weather lookup service."""

import os
from datetime import datetime, timezone

# Cache max age (milliseconds). Fixed, not read from the environment.
MAX_AGE_MS = 10 * 1000

# OpenWeatherMap current-weather endpoint
OPENWEATHERMAP_URL = "https://api.openweathermap.org/data/2.5/weather"
OPENWEATHERMAP_API_KEY = os.environ.get("OPENWEATHERMAP_API_KEY", "")
UNITS = "imperial"
REQUEST_TIMEOUT = 10  # seconds

# Worker threads serving the async lookup path
ASYNC_WORKERS = int(os.environ.get("ASYNC_WORKERS", "4"))

# Background sweep of expired cache entries; 0 disables it (lazy expiry only)
CACHE_SWEEP_SECONDS = int(os.environ.get("CACHE_SWEEP_SECONDS", "0"))

PORT = int(os.environ.get("PORT", "5051"))

DEGREE = "°"

# 16-point compass directions
WIND_DIRECTIONS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def degree_to_compass(deg):
    """Convert wind direction in degrees to compass string."""
    if deg is None:
        return "N/A"
    idx = round(deg / 22.5) % 16
    return WIND_DIRECTIONS[idx]


def format_clock(epoch_seconds, tz=None):
    """Format a unix timestamp as e.g. "06:41:07 AM UTC".

    Returns "Not available" when the timestamp is missing or zero.
    """
    if not epoch_seconds or epoch_seconds <= 0:
        return "Not available"
    dt = datetime.fromtimestamp(epoch_seconds, tz or timezone.utc)
    return dt.strftime("%I:%M:%S %p %Z")
