# File: indexnow_push/providers.py
"""indexnow_push.providers: IndexNow-compatible endpoints and response codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

__all__ = ["Provider", "PROVIDERS", "STATUS_OUTCOMES", "describe_status", "select_providers"]


@dataclass(frozen=True, slots=True)
class Provider:
    """A search engine accepting IndexNow submissions."""

    name: str
    endpoint: str


# Submission order is the order of this tuple.
PROVIDERS: Tuple[Provider, ...] = (
    Provider("IndexNow", "https://api.indexnow.org/indexnow"),
    Provider("Microsoft Bing", "https://www.bing.com/indexnow"),
    Provider("Naver", "https://searchadvisor.naver.com/indexnow"),
    Provider("Seznam.cz", "https://search.seznam.cz/indexnow"),
    Provider("Yandex", "https://yandex.com/indexnow"),
    Provider("Yep", "https://indexnow.yep.com/indexnow"),
)

STATUS_OUTCOMES: Dict[int, str] = {
    200: "URL(s) submitted successfully",
    202: "URL(s) received, IndexNow key validation pending",
    400: "Invalid format, the request was malformed",
    403: "Key not valid (key file not found or key not in the file)",
    422: "URLs don't belong to the host or the key doesn't match the protocol schema",
    429: "Too many requests (potential spam)",
}


def describe_status(status: int) -> Optional[str]:
    """Return the human-readable outcome of *status*, ``None`` for unknown codes."""
    return STATUS_OUTCOMES.get(status)


def select_providers(
    names: Optional[Iterable[str]] = None,
    providers: Tuple[Provider, ...] = PROVIDERS,
) -> Tuple[Provider, ...]:
    """Narrow *providers* to *names* (case-insensitive), keeping the fixed order.

    ``None`` or an empty selection means every provider. Unknown names raise
    :class:`KeyError`.
    """
    if not names:
        return providers
    wanted = {name.lower() for name in names}
    known = {p.name.lower() for p in providers}
    unknown = sorted(wanted - known)
    if unknown:
        raise KeyError(f"unknown provider(s): {', '.join(unknown)}")
    return tuple(p for p in providers if p.name.lower() in wanted)
