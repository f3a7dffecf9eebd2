"""Caller-side weather operations: drive a lookup and format what to show."""

import logging

from config import DEGREE, degree_to_compass, format_clock

log = logging.getLogger(__name__)


def no_weather_message(location):
    return f"No weather found for {location}"


def format_weather(data):
    """Display lines for a single WeatherData, keyed by field."""
    name = f"{data.name}, {data.country}" if data.country else data.name
    return {
        "location": name,
        "temperature": f"{data.temp}{DEGREE} F",
        "sunrise": format_clock(data.sunrise),
        "sunset": format_clock(data.sunset),
        "humidity": f"{data.humidity}%",
        "description": data.description,
        "wind": f"{data.wind_speed} mph {degree_to_compass(data.wind_deg)}",
    }


class WeatherOperations:
    def __init__(self, sync_service, async_service):
        self._sync = sync_service
        self._async = async_service
        self.last_results = None

    def get_weather_sync(self, location):
        """Look up ``location`` on the blocking path and return display text."""
        self.last_results = None
        try:
            results = self._sync.get_current_weather(location)
        except Exception:
            log.exception("Sync weather lookup failed for %s", location)
            results = []
        return self.display_results(results, location)

    def get_weather_async(self, location, on_display):
        """Look up ``location`` on the async path.

        ``on_display`` receives the display text once results arrive.
        """
        self.last_results = None

        def _on_results(results):
            on_display(self.display_results(results, location))

        return self._async.get_current_weather(location, _on_results)

    def display_results(self, results, location):
        self.last_results = results
        if not results:
            return no_weather_message(location)
        lines = format_weather(results[0])
        return "\n".join([
            lines["location"],
            lines["temperature"],
            f"Sunrise: {lines['sunrise']}",
            f"Sunset: {lines['sunset']}",
            f"Humidity: {lines['humidity']}",
            f"Wind: {lines['wind']}",
            lines["description"],
        ])
