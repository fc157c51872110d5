"""
util/lang.py

Script-based language detection for short user inputs (city names).
Only two languages are recognised: Hebrew ("he") and English ("en").
"""

import re
from typing import Literal


LanguageTag = Literal["he", "en"]

HEBREW: LanguageTag = "he"
ENGLISH: LanguageTag = "en"

_HEBREW_CHARS = re.compile(r"[\u0590-\u05FF]")


def has_hebrew(text: str) -> bool:
    return bool(_HEBREW_CHARS.search(text or ""))


def detect_language(text: str) -> LanguageTag:
    """Return "he" when the text contains any Hebrew-block character, else "en"."""
    return HEBREW if has_hebrew(text) else ENGLISH


def other_language(lang: LanguageTag) -> LanguageTag:
    return ENGLISH if lang == HEBREW else HEBREW
