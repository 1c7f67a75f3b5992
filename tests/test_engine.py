# File: tests/test_engine.py
"""End-to-end runs of the push engine against a local site and local providers."""
from __future__ import annotations

import json

import pytest

from indexnow_push.config import PushConfig
from indexnow_push.dispatcher import IndexNowRequest
from indexnow_push.engine import start_push
from indexnow_push.errors import FetchError, IntegrityError, ParseError
from indexnow_push.providers import Provider
from indexnow_push.report.json_report import render_json
from tests.sitemaps import sitemap_index, urlset

KEY = "0f6a3c1e9b"


def publish_site(site) -> str:
    """Serve a key file and an index with two leaves (3 + 2 URLs); return the index URL."""
    site.add(f"/{KEY}.txt", KEY, content_type="text/plain")
    posts = site.add("/sitemap-posts.xml", urlset(*(site.url(f"/post/{i}") for i in (1, 2, 3))))
    pages = site.add("/sitemap-pages.xml", urlset(site.url("/about"), site.url("/contact")))
    return site.add("/sitemap_index.xml", sitemap_index(posts, pages))


def local_providers(site, *statuses: int):
    return tuple(
        Provider(f"Engine{i}", site.add(f"/indexnow/{i}", status=status, method="POST"))
        for i, status in enumerate(statuses)
    )


@pytest.mark.asyncio()
async def test_full_run_submits_aggregated_urls(site):
    root = publish_site(site)
    providers = local_providers(site, 200, 202, 422)
    config = PushConfig(key=KEY, sitemap_url=root, timeout=5)

    report = await start_push(config, providers)

    expected = [site.url(p) for p in ("/post/1", "/post/2", "/post/3", "/about", "/contact")]
    assert report.urls == expected
    assert [(s.provider, s.status) for s in report.submissions] == [
        ("Engine0", 200),
        ("Engine1", 202),
        ("Engine2", 422),
    ]
    assert len(site.posts) == 3
    for _, _, body in site.posts:
        request = IndexNowRequest.from_json(body)
        assert request.host == config.host
        assert request.key == KEY
        assert list(request.url_list) == expected


@pytest.mark.asyncio()
async def test_dry_run_submits_nothing(site):
    root = publish_site(site)
    providers = local_providers(site, 200)
    config = PushConfig(key=KEY, sitemap_url=root, timeout=5, dry_run=True)

    report = await start_push(config, providers)

    assert len(report.urls) == 5
    assert report.submissions == []
    assert site.posts == []


@pytest.mark.asyncio()
async def test_bad_key_aborts_before_fetching_sitemaps(site):
    root = publish_site(site)
    site.add(f"/{KEY}.txt", "another-key", content_type="text/plain")
    providers = local_providers(site, 200)

    with pytest.raises(IntegrityError):
        await start_push(PushConfig(key=KEY, sitemap_url=root, timeout=5), providers)

    assert site.hits["/sitemap_index.xml"] == 0
    assert site.posts == []


@pytest.mark.asyncio()
async def test_sitemap_failure_aborts_before_submitting(site):
    root = publish_site(site)
    site.add("/sitemap-pages.xml", "<urlset><url>", content_type="application/xml")
    providers = local_providers(site, 200)

    with pytest.raises(ParseError) as exc_info:
        await start_push(PushConfig(key=KEY, sitemap_url=root, timeout=5), providers)

    assert exc_info.value.url == site.url("/sitemap-pages.xml")
    assert site.posts == []


@pytest.mark.asyncio()
async def test_missing_child_sitemap_aborts(site):
    site.add(f"/{KEY}.txt", KEY, content_type="text/plain")
    root = site.add("/sitemap.xml", sitemap_index(site.url("/gone.xml")))

    with pytest.raises(FetchError):
        await start_push(PushConfig(key=KEY, sitemap_url=root, timeout=5), ())


@pytest.mark.asyncio()
async def test_json_report(site, tmp_path):
    root = publish_site(site)
    providers = local_providers(site, 429)
    report = await start_push(PushConfig(key=KEY, sitemap_url=root, timeout=5), providers)

    path = render_json(report, tmp_path / "reports" / "push.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["url_count"] == 5
    assert data["host"] == site.base_url.removeprefix("http://")
    assert data["submissions"] == [
        {
            "provider": "Engine0",
            "endpoint": site.url("/indexnow/0"),
            "status": 429,
            "outcome": "Too many requests (potential spam)",
        }
    ]
