"""Weather lookup service: Flask front end over sync and async lookup paths."""

import logging

import requests
from flask import Flask, jsonify, render_template, request
from apscheduler.schedulers.background import BackgroundScheduler

from cache import WeatherCache
from config import CACHE_SWEEP_SECONDS, PORT, REQUEST_TIMEOUT
from operations import format_weather, no_weather_message
from services import WeatherServiceAsync, WeatherServiceSync

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

app = Flask(__name__)

# One cache for the life of the process, shared by both lookup paths.
cache = WeatherCache()
sync_service = WeatherServiceSync(cache)
async_service = WeatherServiceAsync(cache)


# ── Async delivery ────────────────────────────────────────────────────

def _post_results(callback_url, location):
    """Build a result callback that POSTs the records to ``callback_url``."""
    def _deliver(results):
        payload = {"location": location, "results": [r.to_dict() for r in results]}
        try:
            resp = requests.post(callback_url, json=payload, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
        except Exception:
            log.exception("Failed to deliver results for %s to %s", location, callback_url)
            return
        log.info("Delivered %d result(s) for %s", len(results), location)
    return _deliver


# ── Scheduled Jobs ────────────────────────────────────────────────────

def _sweep_cache():
    try:
        cache.purge_expired()
    except Exception:
        log.exception("Cache sweep failed")


# ── Routes ────────────────────────────────────────────────────────────

@app.route("/")
def index():
    location = request.args.get("location", "")
    weather = None
    message = None
    if location:
        results = sync_service.get_current_weather(location)
        if results:
            weather = format_weather(results[0])
        else:
            message = no_weather_message(location)
    return render_template("index.html", location=location, weather=weather, message=message)


@app.route("/api/weather")
def api_weather():
    """Current weather for a location, via the blocking lookup path."""
    location = request.args.get("location", "")
    if not location.strip():
        return jsonify({"error": "location required"}), 400

    results = sync_service.get_current_weather(location)
    if not results:
        return jsonify({"error": no_weather_message(location)}), 404
    return jsonify([r.to_dict() for r in results])


@app.route("/api/weather/async", methods=["POST"])
def api_weather_async():
    """Queue a lookup; results are POSTed to ``callback_url`` when ready."""
    data = request.get_json(silent=True)
    if not data or not data.get("location") or not data.get("callback_url"):
        return jsonify({"error": "location and callback_url required"}), 400

    location = data["location"]
    async_service.get_current_weather(location, _post_results(data["callback_url"], location))
    return jsonify({"accepted": True}), 202


@app.route("/health")
def health():
    return jsonify({"ok": True, "cached_locations": len(cache)})


# ── Startup ───────────────────────────────────────────────────────────

if __name__ == "__main__":
    scheduler = None
    if CACHE_SWEEP_SECONDS > 0:
        scheduler = BackgroundScheduler()
        scheduler.add_job(_sweep_cache, "interval", seconds=CACHE_SWEEP_SECONDS)
        scheduler.start()
        log.info("Sweeping expired cache entries every %ds", CACHE_SWEEP_SECONDS)

    log.info("Starting weather service on port %d", PORT)
    try:
        app.run(host="0.0.0.0", port=PORT, debug=False)
    finally:
        if scheduler:
            scheduler.shutdown(wait=False)
        async_service.shutdown(wait=False)
