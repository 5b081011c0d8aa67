"""Static HTML page showing each word as a strip of letter signs.

WHY: The quickest way to look at a conversion is in a browser. This
formatter writes a self-contained page with one block per word and one
cell per letter, mirroring the interactive converter's layout.

HOW: Builds the page with string templates. Every text value is escaped
with html.escape. Resolved cells become <img> tags pointing at the asset
reference; fallback cells become a <div> with the display character.
The page direction follows the alphabet (rtl for Arabic).

RULES:
- One <section class="word-container"> per word, in order
- Word header: word text, alphabet label, "Word N of M"
- Cell footer: "Letter N" plus a PNG/TEXT format indicator
- Separators between cells, not after the last one
- Output suffix: "-signs.html"
- Media type: "text/html"
"""

from __future__ import annotations

import html
from pathlib import Path
from typing import List

from letter_signs.core.alphabets import get_settings
from letter_signs.core.ir import CellOutcome, GlyphCell, SignStrip, WordResult
from letter_signs.formatters.base import BaseFormatter, FormatterOutput

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}" dir="{direction}">
<head>
<meta charset="utf-8">
<title>Letter Signs</title>
<style>
body {{ font-family: {font}; }}
.letters-container {{ display: flex; flex-wrap: wrap; align-items: center; gap: 8px; }}
.letter-sign-image {{ max-height: 120px; }}
.letter-fallback {{ font-size: 3em; min-width: 1.5em; text-align: center; }}
.letter-separator {{ width: 2px; height: 80px; background: #ccc; }}
.format-indicator {{ font-size: 0.7em; margin-left: 4px; }}
</style>
</head>
<body>
<div class="counters">Words: {words} &middot; Letters: {letters}</div>
{sections}
</body>
</html>
"""


def _asset_src(ref: str) -> str:
    """Turn a filesystem path into a file:// URI; leave URLs untouched."""
    if "://" in ref:
        return ref
    path = Path(ref)
    return path.resolve().as_uri() if path.is_absolute() else ref


def _render_cell(cell: GlyphCell) -> str:
    display = html.escape(cell.display_form)
    if cell.outcome is CellOutcome.RESOLVED_ASSET and cell.asset_ref:
        body = (
            '<img class="letter-sign-image" src="{src}" alt="Sign language for letter {d}" '
            'title="Letter: {d}" data-letter="{d}" data-filename="{key}">'
        ).format(
            src=html.escape(_asset_src(cell.asset_ref)),
            d=display,
            key=html.escape(cell.asset_key),
        )
    else:
        body = '<div class="letter-fallback" data-letter="{d}">{d}</div>'.format(d=display)

    return (
        '<div class="letter-group">'
        '<div class="letter-image-container">{body}</div>'
        '<div class="letter-label">{label}'
        '<span class="format-indicator format-{fmt_lower}">{fmt}</span></div>'
        '</div>'
    ).format(
        body=body,
        label=html.escape(cell.label),
        fmt=cell.format_tag,
        fmt_lower=(cell.format_tag or "").lower(),
    )


def _render_word(word: WordResult) -> str:
    parts: List[str] = []
    for i, cell in enumerate(word.cells):
        parts.append(_render_cell(cell))
        if i < len(word.cells) - 1:
            parts.append('<div class="letter-separator"></div>')

    return (
        '<section class="word-container">\n'
        '<div class="word-text"><span>{text}</span>'
        '<span class="language-indicator">{alphabet}</span>'
        '<span class="language-indicator">{label}</span></div>\n'
        '<div class="letters-container">{cells}</div>\n'
        '</section>'
    ).format(
        text=html.escape(word.text),
        alphabet=html.escape(word.alphabet_label),
        label=html.escape(word.label),
        cells="".join(parts),
    )


class HTMLStripFormatter(BaseFormatter):
    """Formatter that produces a static HTML sign strip page."""

    @property
    def name(self) -> str:
        return "HTML Strip"

    def format(self, strip: SignStrip) -> List[FormatterOutput]:
        settings = get_settings(strip.alphabet)
        content = _PAGE_TEMPLATE.format(
            lang=strip.alphabet.value,
            direction=settings.direction,
            font=settings.font,
            words=strip.counters.word_count,
            letters=strip.counters.letter_count,
            sections="\n".join(_render_word(word) for word in strip.words),
        )

        return [
            FormatterOutput(
                suffix="-signs.html",
                content=content,
                media_type="text/html",
            )
        ]
