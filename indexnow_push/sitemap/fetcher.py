# indexnow_push/sitemap/fetcher.py
"""
Fetcher module: retrieves raw sitemap documents over HTTP.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from indexnow_push.errors import FetchError
from indexnow_push.logger import logger
from indexnow_push.sitemap.models import SitemapDocument


class SitemapFetcher:
    """Performs one GET per sitemap URL; no retries, no rate limiting."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> SitemapDocument:
        """
        Fetch *url* and return its body.

        Raises FetchError on transport failure, timeout or a non-2xx status.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}", status=resp.status)
                content = await resp.read()
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        logger.debug("Fetched %s (%d bytes)", url, len(content))
        return SitemapDocument(url, content)
