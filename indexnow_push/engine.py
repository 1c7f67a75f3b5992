# File: indexnow_push/engine.py
"""indexnow_push.engine: orchestration of one push run.

Key check → sitemap aggregation → submission. Everything before the
submission phase is fail-fast: no provider is contacted unless the key is
verified and the complete URL list was obtained.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

from aiohttp import ClientSession, ClientTimeout

from indexnow_push.config import PushConfig
from indexnow_push.dispatcher import IndexNowRequest, SubmissionResult, dispatch
from indexnow_push.keycheck import verify_key
from indexnow_push.logger import logger
from indexnow_push.providers import PROVIDERS, Provider, select_providers
from indexnow_push.sitemap import SitemapFetcher, aggregate

__all__ = ["PushReport", "start_push"]


@dataclass(slots=True)
class PushReport:
    """Result of one run: the aggregated URLs and every provider's answer."""

    host: str
    sitemap_url: str
    urls: List[str] = field(default_factory=list)
    submissions: List[SubmissionResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "sitemap_url": self.sitemap_url,
            "url_count": len(self.urls),
            "urls": list(self.urls),
            "submissions": [asdict(s) for s in self.submissions],
        }


async def start_push(
    config: PushConfig, providers: Tuple[Provider, ...] = PROVIDERS
) -> PushReport:
    """Run the key check, aggregate the sitemap and notify the providers.

    *providers* is narrowed by the names in ``config.providers``.
    """
    sitemap_url = str(config.sitemap_url)
    report = PushReport(host=config.host, sitemap_url=sitemap_url)

    timeout = ClientTimeout(total=config.timeout)
    async with ClientSession(timeout=timeout, headers={"User-Agent": config.user_agent}) as session:
        await verify_key(session, config.key, sitemap_url)

        report.urls = await aggregate(sitemap_url, SitemapFetcher(session))
        logger.info("Got %d URL(s) to index from %s", len(report.urls), sitemap_url)

        if config.dry_run:
            logger.info("Dry run, nothing submitted")
            return report

        request = IndexNowRequest.build(sitemap_url, config.key, report.urls)
        selected = select_providers(config.providers, providers)
        report.submissions = await dispatch(session, selected, request)

    return report
