"""Render-instruction JSON formatter.

WHY: A presentation layer (web page, desktop widget, another program)
needs, for every letter, either the image to show or the fallback text,
plus the labels for each word. This formatter writes those instructions
as JSON that any renderer can consume, validated against
sign_strip_schema.json.

HOW: Walks the SignStrip words and cells in order and emits one object
per cell. Resolved cells carry the asset reference, fallback cells carry
the display character. The document is validated with jsonschema before
returning.

RULES:
- One word object per WordResult, one cell object per GlyphCell, in order
- Resolved cells: outcome "resolved-asset", format "PNG", "asset" field
- Fallback cells: outcome "fallback-text", format "TEXT", "fallback" field
- Top-level "text" is the copy-all string
- Output suffix: "-signs.json"
- Schema validation is mandatory — raises on invalid output
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from letter_signs.core.alphabets import get_settings
from letter_signs.core.ir import CellOutcome, GlyphCell, SignStrip, WordResult
from letter_signs.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent / "sign_strip_schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def get_schema() -> Dict[str, Any]:
    """Load the render JSON schema, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _cell_to_dict(cell: GlyphCell) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "position": cell.position,
        "label": cell.label,
        "character": cell.character,
        "display": cell.display_form,
        "asset_key": cell.asset_key,
        "outcome": cell.outcome.value,
        "format": cell.format_tag,
    }
    if cell.outcome is CellOutcome.RESOLVED_ASSET:
        data["asset"] = cell.asset_ref
    else:
        data["fallback"] = cell.display_form
    return data


def _word_to_dict(word: WordResult) -> Dict[str, Any]:
    return {
        "index": word.index,
        "text": word.text,
        "label": word.label,
        "cells": [_cell_to_dict(cell) for cell in word.cells],
    }


class RenderJSONFormatter(BaseFormatter):
    """Formatter that produces per-cell render instructions as JSON."""

    @property
    def name(self) -> str:
        return "Render JSON"

    def format(self, strip: SignStrip) -> List[FormatterOutput]:
        """Convert the SignStrip IR into render-instruction JSON.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to sign_strip_schema.json.
        """
        settings = get_settings(strip.alphabet)
        output: Dict[str, Any] = {
            "alphabet": strip.alphabet.value,
            "alphabet_label": settings.label,
            "direction": settings.direction,
            "counters": {
                "words": strip.counters.word_count,
                "letters": strip.counters.letter_count,
            },
            "text": strip.copy_text(),
            "words": [_word_to_dict(word) for word in strip.words],
        }

        jsonschema.validate(instance=output, schema=get_schema())

        return [
            FormatterOutput(
                suffix="-signs.json",
                content=json.dumps(output, indent=2, ensure_ascii=False),
                media_type="application/json",
            )
        ]
