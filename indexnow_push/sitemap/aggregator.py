# File: indexnow_push/sitemap/aggregator.py
"""indexnow_push.sitemap.aggregator: depth-first resolution of a sitemap tree.

Starting from one root URL, every sitemap index is expanded depth-first in
document order and the page locations of all URL-set leaves are collected in
pre-order. Each sitemap URL is fetched at most once per run, so cyclic and
diamond-shaped references terminate. Page URLs themselves are not
deduplicated: a page listed by two leaves appears twice.

Any fetch or parse failure aborts the whole run; no partial list is returned.
"""

from __future__ import annotations

from typing import List, Protocol
from urllib.parse import urljoin

from indexnow_push.errors import ParseError
from indexnow_push.logger import logger
from indexnow_push.sitemap.models import SitemapDocument, SitemapIndexDoc, TraversalState
from indexnow_push.sitemap.parser import SitemapSyntaxError, classify

__all__ = ["DocumentFetcher", "aggregate", "resolve"]


class DocumentFetcher(Protocol):
    async def fetch(self, url: str) -> SitemapDocument: ...


async def resolve(url: str, fetcher: DocumentFetcher, state: TraversalState) -> None:
    """Expand the sitemap at *url* into *state*, descending into child sitemaps.

    Children are pushed in reverse so they pop in document order (pre-order).
    """
    pending: List[str] = [url]
    while pending:
        current = pending.pop()
        if current in state.visited:
            logger.debug("Skipping already visited sitemap %s", current)
            continue
        state.visited.add(current)

        document = await fetcher.fetch(current)
        try:
            parsed = classify(document.content)
        except SitemapSyntaxError as exc:
            raise ParseError(current, exc) from exc

        if isinstance(parsed, SitemapIndexDoc):
            logger.info(
                "Sitemap index %s references %d sitemap(s)", current, len(parsed.sitemaps)
            )
            pending.extend(urljoin(current, child) for child in reversed(parsed.sitemaps))
            continue

        logger.info("Sitemap %s lists %d URL(s)", current, len(parsed.urls))
        state.urls.extend(parsed.urls)


async def aggregate(root_url: str, fetcher: DocumentFetcher) -> List[str]:
    """Return every page URL reachable from *root_url*, in pre-order."""
    state = TraversalState()
    await resolve(root_url, fetcher, state)
    logger.debug("Visited %d sitemap(s), collected %d URL(s)", len(state.visited), len(state.urls))
    return state.urls
