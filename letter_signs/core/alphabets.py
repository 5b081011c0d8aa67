"""Alphabet registry: display-form and asset-key rules per alphabet.

WHY: The two supported alphabets derive their letter sign images in
different ways. Latin letters are case-folded to a single uppercase sign;
Arabic letters are looked up in a fixed table of sign names. Every other
part of the pipeline asks this module, so the rules live in one place.

HOW: Alphabet is a str enum whose value is the alphabet identifier used in
asset paths ("en", "ar"). display_form() and asset_key() are total
functions over any single character. AlphabetSettings wraps the static
display table from config.ALPHABET_SETTINGS.

RULES:
- LATIN: display_form = asset_key = char.upper()
- ARABIC: display_form = char unchanged
- ARABIC: asset_key = ARABIC_CHAR_MAP[char], or char itself when unmapped
- No error conditions — characters outside both alphabets pass through
- parse_alphabet() is the only function that raises (unknown names)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from letter_signs.config import ALPHABET_SETTINGS, ARABIC_CHAR_MAP


class Alphabet(str, enum.Enum):
    """Supported sign alphabets.

    Inherits from str so values serialize cleanly and double as the
    directory name of each alphabet's images.
    """

    LATIN = "en"
    ARABIC = "ar"


_ALPHABET_ALIASES: dict[str, Alphabet] = {
    "en": Alphabet.LATIN,
    "english": Alphabet.LATIN,
    "latin": Alphabet.LATIN,
    "ar": Alphabet.ARABIC,
    "arabic": Alphabet.ARABIC,
}


@dataclass(frozen=True)
class AlphabetSettings:
    """Static presentation settings for one alphabet.

    RULES:
    - label: upper-case tag shown next to each word ("ENGLISH", "ARABIC")
    - name: human-readable alphabet name
    - placeholder: hint text for an empty input box
    - direction: "ltr" or "rtl"
    - font: CSS font-family stack for rendering the text
    """

    alphabet: Alphabet
    label: str
    name: str
    placeholder: str
    direction: str
    font: str


def parse_alphabet(value: str | Alphabet) -> Alphabet:
    """Resolve an alphabet identifier or alias to an Alphabet.

    Accepts "en", "ar", "latin", "english", "arabic" in any case.

    Raises:
        ValueError: If the value names no supported alphabet.
    """
    if isinstance(value, Alphabet):
        return value
    alphabet = _ALPHABET_ALIASES.get(value.strip().lower())
    if alphabet is None:
        raise ValueError(
            "Unknown alphabet '{}'. Supported: {}".format(
                value, ", ".join(sorted(_ALPHABET_ALIASES))
            )
        )
    return alphabet


def get_settings(alphabet: Alphabet) -> AlphabetSettings:
    """Return the display settings for an alphabet."""
    raw = ALPHABET_SETTINGS[alphabet.value]
    return AlphabetSettings(alphabet=alphabet, **raw)


def display_form(char: str, alphabet: Alphabet) -> str:
    """Return the character as shown to the user.

    Latin characters are upper-cased; Arabic characters are unchanged.
    """
    if alphabet is Alphabet.LATIN:
        return char.upper()
    return char


def asset_key(char: str, alphabet: Alphabet) -> str:
    """Return the canonical asset key naming the sign image for a character.

    WHY: The sign images are stored one per key, so every character must
    map to exactly one key, deterministically, from (char, alphabet) alone.

    HOW: Latin upper-cases the character. Arabic looks the character up in
    ARABIC_CHAR_MAP and falls back to the character itself.

    RULES:
    - Pure function, no state, never raises
    - Identical input always yields an identical key
    """
    if alphabet is Alphabet.LATIN:
        return char.upper()
    return ARABIC_CHAR_MAP.get(char, char)
