# File: indexnow_push/keycheck.py
"""indexnow_push.keycheck: ownership proof through the published key file."""

from __future__ import annotations

import asyncio
from urllib.parse import urlsplit, urlunsplit

from aiohttp import ClientError, ClientSession

from indexnow_push.errors import IntegrityError
from indexnow_push.logger import logger

__all__ = ["key_file_url", "verify_key"]


def key_file_url(key: str, site_url: str) -> str:
    """Return ``scheme://host/<key>.txt`` for the site serving *site_url*."""
    parts = urlsplit(site_url)
    return urlunsplit((parts.scheme, parts.netloc, f"/{key}.txt", "", ""))


async def verify_key(session: ClientSession, key: str, site_url: str) -> str:
    """Check that the site publishes *key* at its root and return the key file URL.

    Raises IntegrityError when the file can't be fetched, the status isn't 200,
    the body can't be read, or the trimmed body differs from *key*.
    """
    url = key_file_url(key, site_url)
    try:
        async with session.get(url, raise_for_status=False) as resp:
            if resp.status != 200:
                raise IntegrityError(f"Unable to reach the key file {url}: HTTP {resp.status}")
            raw = await resp.read()
    except (ClientError, asyncio.TimeoutError) as exc:
        raise IntegrityError(f"Unable to reach the key file {url}: {exc!r}") from exc

    try:
        body = raw.decode("utf-8").strip()
    except UnicodeDecodeError as exc:
        raise IntegrityError(f"Unable to read the key file {url}: {exc}") from exc

    if body != key:
        raise IntegrityError(f"Key file {url} does not contain the key {key!r}")

    logger.info("Key file integrity check completed: %s", url)
    return url
