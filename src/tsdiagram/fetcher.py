"""Source fetcher — retrieve raw source text from a URL or a local path."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import urljoin

import httpx

from tsdiagram import config
from tsdiagram.errors import FetchFailure

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self, location: str) -> str: ...


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


class SourceFetcher:
    """Reads source text over HTTP or from disk.

    Relative locations are joined to ``base_url`` when one is configured,
    mirroring how a browser resolves a path against the page origin.
    Otherwise they are read from ``root`` on the local filesystem.
    """

    def __init__(
        self,
        root: Path | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.root = root if root is not None else config.SOURCE_ROOT
        self.base_url = base_url if base_url is not None else config.SOURCE_BASE_URL
        self.timeout = timeout if timeout is not None else config.FETCH_TIMEOUT
        self._transport = transport

    async def fetch(self, location: str) -> str:
        if is_url(location):
            return await self._fetch_url(location)
        if self.base_url:
            return await self._fetch_url(urljoin(self.base_url, location))
        # Disk reads stay off the event loop
        return await asyncio.to_thread(self._read_local, location)

    async def _fetch_url(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            raise FetchFailure(None, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.info("GET %s -> %d %s", url, response.status_code, response.reason_phrase)
            raise FetchFailure(response.status_code, response.reason_phrase)
        return response.text

    def _read_local(self, path: str) -> str:
        root = self.root.resolve()
        full_path = (root / path).resolve()

        if not full_path.is_relative_to(root):
            raise FetchFailure(403, "Forbidden")
        if not full_path.is_file():
            raise FetchFailure(404, "Not Found")

        try:
            return full_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise FetchFailure(None, str(e)) from e
