"""
weatherchat/service.py

End-to-end weather lookup for a chat prompt: clean the text, resolve the city,
fetch current conditions, and return one localized sentence. Every failure is
turned into a message; nothing here raises for "not found" or provider errors.
"""

import logging
import re

from util.lang import detect_language
from weatherchat.replies import (
    compose_weather_reply,
    fetch_failed_message,
    not_found_message,
    parse_failed_message,
)
from weatherchat.tools.weather import FetchFailure, ParseFailure, fetch_conditions, resolve_city


log = logging.getLogger(__name__)

_STRIP_PUNCTUATION = re.compile(r"[!?.,]")


def clean_city_text(text: str) -> str:
    return _STRIP_PUNCTUATION.sub("", text or "").strip()


def get_weather(city_text: str) -> str:
    """Return a weather summary (or a localized error message) for a city name."""
    city = clean_city_text(city_text)
    # Language of the cleaned prompt drives the reply; resolve_city detects its own.
    lang = detect_language(city)

    geo = resolve_city(city)
    if not geo:
        return not_found_message(city, lang)

    try:
        observation = fetch_conditions(geo.latitude, geo.longitude)
    except FetchFailure:
        return fetch_failed_message(lang)
    except ParseFailure as exc:
        log.warning("unusable forecast for %s: %s", geo.name, exc)
        return parse_failed_message(lang)

    return compose_weather_reply(geo, observation, lang)
