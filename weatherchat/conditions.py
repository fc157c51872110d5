"""
weatherchat/conditions.py

WMO weather interpretation codes (as returned by Open-Meteo) to short
descriptions, one table per supported language.
"""

from types import MappingProxyType

from util.lang import HEBREW, ENGLISH, LanguageTag


CONDITIONS_HE = MappingProxyType({
    0: "שמשי",
    1: "בהיר ברובו",
    2: "מעונן חלקית",
    3: "מעונן",
    45: "ערפל",
    48: "ערפל קפוא",
    51: "טפטוף קל",
    53: "טפטוף",
    55: "טפטוף חזק",
    61: "גשם קל",
    63: "גשם",
    65: "גשם חזק",
    71: "שלג קל",
    73: "שלג",
    75: "שלג כבד",
    80: "ממטרים קלים",
    81: "ממטרים",
    82: "ממטרים חזקים",
    95: "סופת רעמים",
})

CONDITIONS_EN = MappingProxyType({
    0: "Sunny",
    1: "Mostly clear",
    2: "Partly cloudy",
    3: "Cloudy",
    45: "Fog",
    48: "Freezing fog",
    51: "Light drizzle",
    53: "Drizzle",
    55: "Heavy drizzle",
    61: "Light rain",
    63: "Rain",
    65: "Heavy rain",
    71: "Light snow",
    73: "Snow",
    75: "Heavy snow",
    80: "Light showers",
    81: "Showers",
    82: "Heavy showers",
    95: "Thunderstorm",
})

LEXICONS = MappingProxyType({HEBREW: CONDITIONS_HE, ENGLISH: CONDITIONS_EN})
UNKNOWN_CONDITION = MappingProxyType({HEBREW: "לא ידוע", ENGLISH: "Unknown"})


def describe_code(code: float, lang: LanguageTag) -> str:
    """Return the description for `code`, or the language's "unknown" text."""
    return LEXICONS[lang].get(code, UNKNOWN_CONDITION[lang])
