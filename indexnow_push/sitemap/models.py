# indexnow_push/sitemap/models.py
"""
Data models for sitemap discovery.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Tuple


@dataclass(slots=True)
class SitemapDocument:
    """Raw bytes fetched from one sitemap URL."""

    url: str
    content: bytes


@dataclass(frozen=True, slots=True)
class SitemapIndexDoc:
    """Child sitemap locations of a sitemap index, in document order."""

    sitemaps: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class URLSetDoc:
    """Page locations of a leaf sitemap, in document order."""

    urls: Tuple[str, ...]


@dataclass(slots=True)
class TraversalState:
    """Bookkeeping of one aggregation run: fetched sitemaps and collected pages."""

    visited: Set[str] = field(default_factory=set)
    urls: List[str] = field(default_factory=list)
