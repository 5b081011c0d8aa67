"""Shared test fixtures for the letter_signs test suite.

WHY: Most tests need an asset backend whose availability and timing they
control: which keys have images, how long each check takes, which checks
raise. Centralizing it here keeps every module on the same fake.

HOW: FakeLocator implements BaseAssetLocator entirely in memory. Per-key
delays let tests force out-of-order settlement; it records the order in
which checks complete. Fixtures expose a factory and an images directory.

RULES:
- available=None means every key has an image
- References are "{alphabet}/{key}" so tests can read them at a glance
- Each test builds its own locator (no shared mutable state)
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from letter_signs.assets.locator import BaseAssetLocator
from letter_signs.core.alphabets import Alphabet


class FakeLocator(BaseAssetLocator):
    """In-memory asset backend with controllable availability and delays."""

    def __init__(
        self,
        available: Optional[Iterable[str]] = None,
        delays: Optional[Dict[str, float]] = None,
        errors: Optional[Iterable[str]] = None,
    ) -> None:
        self.available = set(available) if available is not None else None
        self.delays = dict(delays or {})
        self.errors = set(errors or ())
        self.completed: List[str] = []

    def reference(self, alphabet: Alphabet, key: str) -> str:
        return "{}/{}".format(alphabet.value, key)

    async def is_available(self, ref: str) -> bool:
        key = ref.split("/", 1)[1]
        await asyncio.sleep(self.delays.get(key, 0))
        if key in self.errors:
            raise OSError("simulated failure for {}".format(ref))
        self.completed.append(ref)
        return self.available is None or key in self.available


@pytest.fixture
def make_locator():
    """Factory for FakeLocator instances."""
    return FakeLocator


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    """An images/ tree with Latin H, I and Arabic BA signs (non-empty PNGs)."""
    root = tmp_path / "images"
    (root / "en").mkdir(parents=True)
    (root / "ar").mkdir(parents=True)
    for rel in ("en/H.png", "en/I.png", "ar/BA.png"):
        (root / rel).write_bytes(b"\x89PNG\r\n\x1a\n")
    return root
