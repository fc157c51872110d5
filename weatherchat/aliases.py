"""
weatherchat/aliases.py

Known colloquial / local-script city names and their canonical search forms.
Lookup is exact: no case folding, no fuzzy matching.
"""

from types import MappingProxyType


CITY_ALIASES = MappingProxyType({
    # Tel Aviv, including the common abbreviations (gershayim and plain quote)
    "תל אביב": "Tel Aviv",
    "תל-אביב": "Tel Aviv",
    "ת״א": "Tel Aviv",
    'ת"א': "Tel Aviv",
    "ירושלים": "Jerusalem",
    "חיפה": "Haifa",
    "באר שבע": "Beersheba",
    "אילת": "Eilat",
    "נתניה": "Netanya",
    "אשדוד": "Ashdod",
    "אשקלון": "Ashkelon",
    "רמת גן": "Ramat Gan",
    "פתח תקווה": "Petah Tikva",
    "ראשון לציון": "Rishon LeZion",
})


def normalize_city_alias(city: str) -> str:
    """Map a known alias to its canonical form; any other input is returned unchanged."""
    return CITY_ALIASES.get(city, city)
