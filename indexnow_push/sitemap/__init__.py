# File: indexnow_push/sitemap/__init__.py
"""indexnow_push.sitemap: discovery of page URLs from a (nested) sitemap."""

from .aggregator import aggregate, resolve
from .fetcher import SitemapFetcher
from .models import SitemapDocument, SitemapIndexDoc, TraversalState, URLSetDoc
from .parser import SitemapSyntaxError, classify

__all__ = [
    "aggregate",
    "resolve",
    "classify",
    "SitemapFetcher",
    "SitemapDocument",
    "SitemapIndexDoc",
    "SitemapSyntaxError",
    "TraversalState",
    "URLSetDoc",
]
