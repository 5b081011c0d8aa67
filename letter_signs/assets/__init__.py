"""Asset locator package — where letter sign images come from.

WHY: Sign images may live on the local disk or on a web server. The cell
resolver only needs to know whether an image is available, so storage
details stay behind one interface.

HOW: locator.py defines BaseAssetLocator and the directory and HTTP
backends. build_locator() picks one from a source string.

RULES:
- All asset availability checks go through a locator
- HTTP access uses httpx.AsyncClient (no direct httpx usage elsewhere)
"""

from letter_signs.assets.locator import (
    BaseAssetLocator,
    DirectoryAssetLocator,
    HttpAssetLocator,
    build_locator,
)

__all__ = [
    "BaseAssetLocator",
    "DirectoryAssetLocator",
    "HttpAssetLocator",
    "build_locator",
]
