"""Unit tests for the alphabet registry.

WHY: Asset keys name the image files. A wrong key silently turns every
affected letter into a text fallback, so each mapping rule is pinned here.

RULES:
- LATIN: key == display form == upper-case
- ARABIC: table lookup with identity fallback, display form unchanged
"""

import pytest

from letter_signs.config import ARABIC_CHAR_MAP
from letter_signs.core.alphabets import (
    Alphabet,
    asset_key,
    display_form,
    get_settings,
    parse_alphabet,
)


class TestLatinRules:
    """Latin letters are case-folded to upper-case for key and display."""

    @pytest.mark.parametrize("char", ["a", "z", "H", "ß", "1", "-", "é"])
    def test_key_equals_upper_equals_display(self, char):
        assert asset_key(char, Alphabet.LATIN) == char.upper()
        assert display_form(char, Alphabet.LATIN) == char.upper()

    def test_lowercase_letter(self):
        assert asset_key("h", Alphabet.LATIN) == "H"


class TestArabicRules:
    """Arabic letters use the fixed table; others map to themselves."""

    def test_every_table_entry(self):
        for char, key in ARABIC_CHAR_MAP.items():
            assert asset_key(char, Alphabet.ARABIC) == key

    def test_hamza_variants(self):
        assert asset_key("أ", Alphabet.ARABIC) == "ALEF_HAMZA_ABOVE"
        assert asset_key("إ", Alphabet.ARABIC) == "ALEF_HAMZA_BELOW"
        assert asset_key("آ", Alphabet.ARABIC) == "ALEF_MADDA"

    @pytest.mark.parametrize("char", ["ء", "a", "7", "پ"])
    def test_unmapped_character_is_its_own_key(self, char):
        assert char not in ARABIC_CHAR_MAP
        assert asset_key(char, Alphabet.ARABIC) == char

    def test_display_form_unchanged(self):
        assert display_form("ب", Alphabet.ARABIC) == "ب"
        assert display_form("a", Alphabet.ARABIC) == "a"


class TestParseAlphabet:
    """parse_alphabet accepts identifiers and aliases, case-insensitive."""

    @pytest.mark.parametrize("value", ["en", "EN", "latin", "English"])
    def test_latin_aliases(self, value):
        assert parse_alphabet(value) is Alphabet.LATIN

    @pytest.mark.parametrize("value", ["ar", "Arabic", " ar "])
    def test_arabic_aliases(self, value):
        assert parse_alphabet(value) is Alphabet.ARABIC

    def test_enum_passthrough(self):
        assert parse_alphabet(Alphabet.ARABIC) is Alphabet.ARABIC

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown alphabet"):
            parse_alphabet("klingon")


class TestSettings:
    def test_directions(self):
        assert get_settings(Alphabet.LATIN).direction == "ltr"
        assert get_settings(Alphabet.ARABIC).direction == "rtl"

    def test_labels(self):
        assert get_settings(Alphabet.LATIN).label == "ENGLISH"
        assert get_settings(Alphabet.ARABIC).label == "ARABIC"
