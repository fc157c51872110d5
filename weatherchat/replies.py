"""
weatherchat/replies.py

User-facing text: the weather sentence and the localized failure messages.
Output is plain text; rendering (markdown etc.) is left to the chat client.
"""

from util.lang import HEBREW, LanguageTag
from weatherchat.conditions import describe_code
from weatherchat.tools.weather import GeoResult, WeatherObservation


def format_number(value) -> str:
    """Render a measurement the way it arrived: 15 -> "15", 15.0 -> "15", 15.3 -> "15.3"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def place_label(place: GeoResult) -> str:
    return f"{place.name}, {place.admin1}" if place.admin1 else place.name


def compose_weather_reply(place: GeoResult, observation: WeatherObservation, lang: LanguageTag) -> str:
    """One sentence: place, temperature, condition and (if known) wind."""
    desc = describe_code(observation.weather_code, lang)
    text = f"{place_label(place)}: {format_number(observation.temperature)}°C, {desc}"
    if observation.wind_speed is None:
        return text
    wind = format_number(observation.wind_speed)
    if lang == HEBREW:
        return f'{text}, רוח {wind} קמ"ש'
    return f"{text}, wind {wind} km/h"


def not_found_message(city: str, lang: LanguageTag) -> str:
    if lang == HEBREW:
        return f'לא הצלחתי למצוא את העיר "{city}". נסי שם אחר או כתיב באנגלית.'
    return f'Could not find city "{city}". Try another name.'


def fetch_failed_message(lang: LanguageTag) -> str:
    if lang == HEBREW:
        return "שגיאה בשליפת נתוני מזג האוויר."
    return "Failed to fetch weather data."


def parse_failed_message(lang: LanguageTag) -> str:
    if lang == HEBREW:
        return "שגיאה בפענוח נתוני מזג האוויר."
    return "Could not parse weather response."
