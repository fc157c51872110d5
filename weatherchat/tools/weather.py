"""
weatherchat.tools.weather

Geocoding and current-conditions lookups using Open-Meteo (free, no key required).

Functions:
- geocode_city_once(city, language): one geocoding query; first candidate or None.
- resolve_city(raw_city): ordered fallback chain across languages and known aliases.
- fetch_conditions(lat, lon): current temperature, weather code and wind speed.

Endpoints and the forecast timezone can be overridden via env:
GEOCODING_API_URL, FORECAST_API_URL, FORECAST_TIMEZONE.
"""

import logging
import os
from dataclasses import dataclass

import requests

from util.http import get_json
from util.lang import ENGLISH, HEBREW, detect_language, other_language
from weatherchat.aliases import normalize_city_alias


log = logging.getLogger(__name__)

GEOCODING_URL = os.getenv("GEOCODING_API_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.getenv("FORECAST_API_URL", "https://api.open-meteo.com/v1/forecast")
FORECAST_TIMEZONE = os.getenv("FORECAST_TIMEZONE", "Asia/Jerusalem")

GEOCODING_CANDIDATES = 5
CURRENT_FIELDS = ("temperature_2m", "weather_code", "wind_speed_10m")


class WeatherError(Exception):
    """Base class for forecast lookup failures."""


class FetchFailure(WeatherError):
    """The forecast provider could not be reached or answered with an error status."""


class ParseFailure(WeatherError):
    """The forecast response lacks the required numeric fields."""


@dataclass(frozen=True)
class GeoResult:
    name: str
    latitude: float
    longitude: float
    country: str | None = None
    admin1: str | None = None


@dataclass(frozen=True)
class WeatherObservation:
    temperature: float
    weather_code: int
    wind_speed: float | None = None


def is_number(value) -> bool:
    # bool is an int subclass but JSON true/false is not a measurement
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def geocode_city_once(city, language):
    """Return the top `GeoResult` for `city` queried with a language preference.

    Any failure (network, timeout, HTTP status, bad JSON) counts as "no match":
    the caller moves on to its next strategy.
    """
    params = {
        "name": city,
        "count": GEOCODING_CANDIDATES,
        "language": language,
        "format": "json",
    }
    log.debug("geocoding %r (language=%s)", city, language)
    try:
        data = get_json(GEOCODING_URL, params=params)
    except (requests.RequestException, ValueError) as exc:
        log.warning("geocoding %r (language=%s) failed: %s", city, language, exc)
        return None

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results:
        return None
    top = results[0]
    if not isinstance(top, dict) or not (is_number(top.get("latitude")) and is_number(top.get("longitude"))):
        log.warning("geocoding %r returned a candidate without coordinates", city)
        return None
    return GeoResult(
        name=top.get("name") or city,
        latitude=float(top["latitude"]),
        longitude=float(top["longitude"]),
        country=top.get("country"),
        admin1=top.get("admin1"),
    )


def resolve_city(raw_city):
    """Resolve a free-text city name to a `GeoResult`, or None when nothing matches.

    Order: detected language, then the other language; for Hebrew input only,
    the canonical alias under English and then Hebrew. First success wins.
    """
    if not raw_city or not raw_city.strip():
        return None

    primary = detect_language(raw_city)
    geo = geocode_city_once(raw_city, primary) or geocode_city_once(raw_city, other_language(primary))
    if geo:
        return geo

    if primary == HEBREW:
        aliased = normalize_city_alias(raw_city)
        if aliased != raw_city:
            log.debug("retrying %r as alias %r", raw_city, aliased)
            return geocode_city_once(aliased, ENGLISH) or geocode_city_once(aliased, HEBREW)

    log.info("no geocoding match for %r", raw_city)
    return None


def fetch_conditions(lat, lon):
    """Fetch current conditions at the given coordinates.

    Raises `FetchFailure` when the provider is unreachable or returns an error
    status, `ParseFailure` when temperature or weather code are missing.
    """
    params = {
        "latitude": str(lat),
        "longitude": str(lon),
        "current": ",".join(CURRENT_FIELDS),
        "timezone": FORECAST_TIMEZONE,
    }
    log.debug("fetching current weather at %s,%s", lat, lon)
    try:
        data = get_json(FORECAST_URL, params=params)
    except requests.JSONDecodeError as exc:
        log.warning("forecast response is not JSON: %s", exc)
        raise ParseFailure("invalid json") from exc
    except requests.RequestException as exc:
        log.warning("forecast request failed: %s", exc)
        raise FetchFailure(str(exc)) from exc

    current = data.get("current") if isinstance(data, dict) else None
    if not isinstance(current, dict):
        raise ParseFailure("missing current weather")
    temperature = current.get("temperature_2m")
    code = current.get("weather_code")
    if not (is_number(temperature) and is_number(code)):
        raise ParseFailure("missing temperature or weather code")

    wind = current.get("wind_speed_10m")
    return WeatherObservation(
        temperature=temperature,
        weather_code=code,
        wind_speed=wind if is_number(wind) else None,
    )
