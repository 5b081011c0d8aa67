"""Unit tests for all formatter modules.

WHY: Formatters are what the presentation layer actually receives. A
render JSON that drops a fallback character, or an HTML page that puts
letters out of order, shows the user the wrong signs.

HOW: A SignStrip is produced by a real session run against FakeLocator
with only "H" available, so every formatter sees both outcomes.
"""

import asyncio
import json

import jsonschema
import pytest

from letter_signs.core.alphabets import Alphabet
from letter_signs.core.ir import SignStrip
from letter_signs.core.session import ConversionSession
from letter_signs.formatters import FORMATTERS
from letter_signs.formatters.html_strip import HTMLStripFormatter
from letter_signs.formatters.plain_text import PlainTextFormatter
from letter_signs.formatters.render_json import RenderJSONFormatter, get_schema


@pytest.fixture
def latin_strip(make_locator):
    session = ConversionSession(make_locator(available=["H"]), alphabet=Alphabet.LATIN)
    asyncio.run(session.convert("Hi there"))
    return session.snapshot()


@pytest.fixture
def arabic_strip(make_locator):
    session = ConversionSession(make_locator(available=["BA"]), alphabet=Alphabet.ARABIC)
    asyncio.run(session.convert("أب"))
    return session.snapshot()


class TestRegistry:
    def test_all_registered(self):
        assert set(FORMATTERS) == {"plain_text", "render_json", "html_strip"}

    def test_names(self):
        for cls in FORMATTERS.values():
            assert cls().name


class TestPlainTextFormatter:
    def test_copy_all_letters(self, latin_strip):
        outputs = PlainTextFormatter().format(latin_strip)
        assert len(outputs) == 1
        assert outputs[0].content == "HITHERE\n"
        assert outputs[0].suffix == "-letters.txt"
        assert outputs[0].media_type == "text/plain"

    def test_empty_strip(self):
        outputs = PlainTextFormatter().format(SignStrip(alphabet=Alphabet.LATIN, source_text=""))
        assert outputs[0].content == ""


class TestRenderJSONFormatter:
    def test_schema_validation(self, latin_strip):
        outputs = RenderJSONFormatter().format(latin_strip)
        data = json.loads(outputs[0].content)
        jsonschema.validate(instance=data, schema=get_schema())
        assert outputs[0].suffix == "-signs.json"

    def test_cells_carry_asset_or_fallback(self, latin_strip):
        data = json.loads(RenderJSONFormatter().format(latin_strip)[0].content)
        first, second = data["words"][0]["cells"]
        assert first["outcome"] == "resolved-asset"
        assert first["format"] == "PNG"
        assert first["asset"] == "en/H"
        assert "fallback" not in first
        assert second["outcome"] == "fallback-text"
        assert second["format"] == "TEXT"
        assert second["fallback"] == "I"
        assert "asset" not in second

    def test_top_level_fields(self, latin_strip):
        data = json.loads(RenderJSONFormatter().format(latin_strip)[0].content)
        assert data["alphabet"] == "en"
        assert data["alphabet_label"] == "ENGLISH"
        assert data["direction"] == "ltr"
        assert data["counters"] == {"words": 2, "letters": 7}
        assert data["text"] == "HITHERE"
        assert [w["label"] for w in data["words"]] == ["Word 1 of 2", "Word 2 of 2"]

    def test_arabic_unescaped_and_rtl(self, arabic_strip):
        content = RenderJSONFormatter().format(arabic_strip)[0].content
        assert "أ" in content
        data = json.loads(content)
        assert data["direction"] == "rtl"
        assert [c["asset_key"] for c in data["words"][0]["cells"]] == ["ALEF_HAMZA_ABOVE", "BA"]

    def test_pending_cell_rejected(self, latin_strip):
        from letter_signs.core.ir import CellOutcome

        latin_strip.words[0].cells[0].outcome = CellOutcome.PENDING
        with pytest.raises(jsonschema.ValidationError):
            RenderJSONFormatter().format(latin_strip)


class TestHTMLStripFormatter:
    def test_structure(self, latin_strip):
        page = HTMLStripFormatter().format(latin_strip)[0].content
        assert page.count('class="word-container"') == 2
        assert '<img class="letter-sign-image" src="en/H"' in page
        assert '<div class="letter-fallback" data-letter="I">I</div>' in page
        assert "Word 2 of 2" in page
        assert 'dir="ltr"' in page

    def test_separators_between_cells_only(self, latin_strip):
        page = HTMLStripFormatter().format(latin_strip)[0].content
        # 2 letters + 5 letters → 1 + 4 separators
        assert page.count('class="letter-separator"') == 5

    def test_rtl_for_arabic(self, arabic_strip):
        page = HTMLStripFormatter().format(arabic_strip)[0].content
        assert 'dir="rtl"' in page
        assert "ARABIC" in page

    def test_escapes_text(self, make_locator):
        session = ConversionSession(make_locator(available=[]))
        asyncio.run(session.convert("<b>"))
        page = HTMLStripFormatter().format(session.snapshot())[0].content
        assert "<b>" not in page.split("<body>")[1]
        assert "&lt;b&gt;" in page
