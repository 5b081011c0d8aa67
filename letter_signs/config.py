"""Configuration constants, alphabet tables, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The Arabic character table and per-alphabet display
settings are plain data structures — not buried in logic — so both
humans and coding agents can modify them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level dicts and strings. Runtime defaults (asset source,
timeouts, default alphabet) can be overridden via environment variables.

RULES:
- ARABIC_CHAR_MAP maps single Arabic characters → asset key strings
- Characters missing from ARABIC_CHAR_MAP use themselves as asset key
- ALPHABET_SETTINGS is keyed by alphabet identifier ("en", "ar")
- Asset images are addressed as {source}/{alphabet}/{key}.png
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Arabic character → asset key
# ---------------------------------------------------------------------------

ARABIC_CHAR_MAP: dict[str, str] = {
    "ا": "ALEF",
    "أ": "ALEF_HAMZA_ABOVE",
    "إ": "ALEF_HAMZA_BELOW",
    "آ": "ALEF_MADDA",
    "ب": "BA",
    "ت": "TA",
    "ث": "THA",
    "ج": "JEEM",
    "ح": "HA",
    "خ": "KHA",
    "د": "DAL",
    "ذ": "THAL",
    "ر": "RA",
    "ز": "ZAY",
    "س": "SEEN",
    "ش": "SHEEN",
    "ص": "SAD",
    "ض": "DAD",
    "ط": "TAH",
    "ظ": "ZAH",
    "ع": "AIN",
    "غ": "GHAIN",
    "ف": "FA",
    "ق": "QAF",
    "ك": "KAF",
    "ل": "LAM",
    "م": "MEEM",
    "ن": "NOON",
    "ه": "HA2",
    "و": "WAW",
    "ي": "YEH",
    "ى": "ALEF_MAKSURA",
    "ة": "TEH_MARBUTA",
    "ئ": "YEH_HAMZA_ABOVE",
    "ؤ": "WAW_HAMZA",
}

# ---------------------------------------------------------------------------
# Per-alphabet display settings
# ---------------------------------------------------------------------------

ALPHABET_SETTINGS: dict[str, dict[str, str]] = {
    "en": {
        "label": "ENGLISH",
        "name": "English",
        "placeholder": "Type your text here... For example: 'He is playing football'",
        "direction": "ltr",
        "font": "'Segoe UI', Tahoma, Geneva, Verdana, sans-serif",
    },
    "ar": {
        "label": "ARABIC",
        "name": "Arabic",
        "placeholder": "اكتب النص هنا... على سبيل المثال: 'هو يلعب كرة القدم'",
        "direction": "rtl",
        "font": "'Arial', 'Segoe UI', 'Tahoma', sans-serif",
    },
}

IMAGE_EXTENSION = ".png"
"""File extension of every letter sign asset."""

# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

ASSET_SOURCE = os.getenv("LETTER_SIGNS_ASSET_SOURCE", "images")
ASSET_TIMEOUT_S = float(os.getenv("LETTER_SIGNS_ASSET_TIMEOUT", "5.0"))
HTTP_TIMEOUT_S = float(os.getenv("LETTER_SIGNS_HTTP_TIMEOUT", "10.0"))
DEFAULT_ALPHABET = os.getenv("LETTER_SIGNS_DEFAULT_ALPHABET", "en")
