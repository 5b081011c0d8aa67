"""Asset locators: where sign images live and whether they are available.

WHY: The converter does not care where the sign images are stored, only
whether the image for (alphabet, key) can be shown. Images usually sit in
an ``images/<alphabet>/`` folder next to the app, but they can also be
served from a static web host. Each storage backend is a locator behind
one small interface, so the cell resolver treats them all alike.

HOW: BaseAssetLocator defines reference() (build the address of an image)
and is_available() (async check). DirectoryAssetLocator checks the local
filesystem in a worker thread. HttpAssetLocator sends a HEAD request via
httpx.AsyncClient. Locators are async context managers so network
backends can open and close their connection pool.

RULES:
- Address layout: {root}/{alphabet}/{key}.png
- Keys containing path separators are percent-encoded in the file name
- is_available() returns a bool; errors propagate to the caller, which
  turns them into a text fallback
- Always use HttpAssetLocator as an async context manager
"""

from __future__ import annotations

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

import httpx

from letter_signs.config import HTTP_TIMEOUT_S, IMAGE_EXTENSION
from letter_signs.core.alphabets import Alphabet

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_RE = re.compile(r"[/\\\x00]")


def _file_name(key: str) -> str:
    if key in (".", "..") or _UNSAFE_FILENAME_RE.search(key):
        key = quote(key, safe="")
    return key + IMAGE_EXTENSION


class BaseAssetLocator(ABC):
    """Abstract base for all asset storage backends.

    To add a new backend:
    1. Subclass BaseAssetLocator
    2. Implement reference() and is_available()
    3. Override __aenter__/__aexit__ if the backend holds resources
    4. Teach build_locator() how to recognize its source string
    """

    async def __aenter__(self) -> BaseAssetLocator:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        return None

    @abstractmethod
    def reference(self, alphabet: Alphabet, key: str) -> str:
        """Return the address of the sign image for an asset key."""

    @abstractmethod
    async def is_available(self, ref: str) -> bool:
        """Check whether the image at ``ref`` can be displayed."""


class DirectoryAssetLocator(BaseAssetLocator):
    """Sign images stored in a local directory tree.

    RULES:
    - reference: str(root / alphabet / "{key}.png")
    - Available only if the path is a regular, non-empty file
    - The filesystem check runs in a worker thread (asyncio.to_thread)
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def reference(self, alphabet: Alphabet, key: str) -> str:
        return str(self._root / alphabet.value / _file_name(key))

    async def is_available(self, ref: str) -> bool:
        return await asyncio.to_thread(_is_nonempty_file, Path(ref))


def _is_nonempty_file(path: Path) -> bool:
    return path.is_file() and path.stat().st_size > 0


class HttpAssetLocator(BaseAssetLocator):
    """Sign images served over HTTP(S) from a base URL.

    WHY: A hosted deployment serves the images from a static web server or
    CDN instead of the local disk.

    HOW: Wraps httpx.AsyncClient. Availability is a HEAD request; servers
    that reject HEAD with 405 are retried with GET. A 2xx response counts
    as available unless it declares a non-image content type.

    RULES:
    - Use as: async with HttpAssetLocator(url) as locator: ...
    - Keys are percent-encoded in the URL path
    - An injected client is used as-is and never closed by the locator
    - Network errors (httpx.HTTPError) propagate to the caller
    """

    def __init__(
        self,
        base_url: str,
        timeout_s: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_s = HTTP_TIMEOUT_S if timeout_s is None else timeout_s
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> HttpAssetLocator:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout_s),
                follow_redirects=True,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "HttpAssetLocator must be used as an async context manager: "
                "async with HttpAssetLocator(url) as locator: ..."
            )
        return self._client

    def reference(self, alphabet: Alphabet, key: str) -> str:
        return "{}/{}/{}{}".format(
            self._base_url, alphabet.value, quote(key, safe=""), IMAGE_EXTENSION
        )

    async def is_available(self, ref: str) -> bool:
        client = self._ensure_client()
        resp = await client.head(ref)
        if resp.status_code == 405:
            resp = await client.get(ref)

        if not resp.is_success:
            logger.debug("Asset %s returned HTTP %d", ref, resp.status_code)
            return False

        content_type = resp.headers.get("content-type", "")
        return not content_type or content_type.startswith("image/")


def build_locator(
    source: Union[str, Path],
    http_timeout_s: Optional[float] = None,
) -> BaseAssetLocator:
    """Pick a locator for an asset source string.

    ``http://`` and ``https://`` URLs get an HttpAssetLocator; anything
    else is treated as a local directory.
    """
    text = str(source)
    if text.startswith(("http://", "https://")):
        return HttpAssetLocator(text, timeout_s=http_timeout_s)
    return DirectoryAssetLocator(text)
