# File: indexnow_push/dispatcher.py
"""indexnow_push.dispatcher: submission of the URL list to IndexNow providers.

Providers are contacted one at a time in their fixed order. The HTTP status
of each answer is classified and logged but never stops the run; failing to
reach a provider at all raises :class:`SubmissionTransportError` and skips the
remaining providers.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlsplit

from aiohttp import ClientError, ClientSession

from indexnow_push.errors import SubmissionTransportError
from indexnow_push.logger import logger
from indexnow_push.providers import Provider, describe_status

__all__ = ["CONTENT_TYPE", "IndexNowRequest", "SubmissionResult", "submit", "dispatch"]

CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True, slots=True)
class IndexNowRequest:
    """Body of one IndexNow submission."""

    host: str
    key: str
    url_list: Tuple[str, ...]

    @classmethod
    def build(cls, site_url: str, key: str, urls: Iterable[str]) -> IndexNowRequest:
        """Create a request for the host serving *site_url*."""
        return cls(host=urlsplit(site_url).netloc, key=key, url_list=tuple(urls))

    def to_dict(self) -> Dict[str, Any]:
        return {"host": self.host, "key": self.key, "urlList": list(self.url_list)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str | bytes) -> IndexNowRequest:
        data = json.loads(payload)
        return cls(host=data["host"], key=data["key"], url_list=tuple(data["urlList"]))


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """HTTP answer of one provider and its classified meaning."""

    provider: str
    endpoint: str
    status: int
    outcome: Optional[str]

    @property
    def accepted(self) -> bool:
        return self.status in (200, 202)


async def submit(session: ClientSession, endpoint: str, request: IndexNowRequest) -> int:
    """POST *request* to *endpoint* and return the HTTP status code."""
    try:
        async with session.post(
            endpoint,
            data=request.to_json().encode("utf-8"),
            headers={"Content-Type": CONTENT_TYPE},
            raise_for_status=False,
        ) as resp:
            return resp.status
    except (ClientError, asyncio.TimeoutError) as exc:
        raise SubmissionTransportError(endpoint, str(exc) or type(exc).__name__) from exc


async def dispatch(
    session: ClientSession,
    providers: Iterable[Provider],
    request: IndexNowRequest,
) -> List[SubmissionResult]:
    """Submit *request* to every provider in order and collect the outcomes."""
    results: List[SubmissionResult] = []
    for provider in providers:
        status = await submit(session, provider.endpoint, request)
        outcome = describe_status(status)
        result = SubmissionResult(provider.name, provider.endpoint, status, outcome)
        results.append(result)

        if outcome is None:
            logger.debug("%s (%s) answered HTTP %d", provider.name, provider.endpoint, status)
            continue
        level = logging.INFO if result.accepted else logging.WARNING
        logger.log(
            level,
            "%s: %s (HTTP %d, %s)",
            provider.name,
            outcome,
            status,
            provider.endpoint,
        )
    return results
