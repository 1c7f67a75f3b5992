# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator
from typing import Dict, List, Tuple

import pytest
import pytest_asyncio
from aiohttp import web

from indexnow_push.logger import configure


class FakeSite:
    """Serves canned responses and records every request it receives."""

    def __init__(self) -> None:
        self.base_url = ""
        self.routes: Dict[Tuple[str, str], Tuple[int, bytes, str]] = {}
        self.hits: Counter[str] = Counter()
        self.posts: List[Tuple[str, str, bytes]] = []

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def add(
        self,
        path: str,
        body: bytes | str = b"",
        *,
        status: int = 200,
        content_type: str = "application/xml",
        method: str = "GET",
    ) -> str:
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.routes[(method, path)] = (status, body, content_type)
        return self.url(path)

    async def handle(self, request: web.Request) -> web.Response:
        self.hits[request.path] += 1
        if request.method == "POST":
            self.posts.append(
                (request.path, request.headers.get("Content-Type", ""), await request.read())
            )
        route = self.routes.get((request.method, request.path))
        if route is None:
            return web.Response(status=404)
        status, body, content_type = route
        return web.Response(status=status, body=body, content_type=content_type)


@pytest_asyncio.fixture
async def site(unused_tcp_port: int) -> AsyncIterator[FakeSite]:
    """Run a FakeSite on a local port for the duration of one test."""
    fake = FakeSite()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", fake.handle)
    runner = web.AppRunner(app)
    await runner.setup()
    tcp = web.TCPSite(runner, "127.0.0.1", unused_tcp_port)
    await tcp.start()
    fake.base_url = f"http://127.0.0.1:{unused_tcp_port}"
    try:
        yield fake
    finally:
        await runner.cleanup()


@pytest.fixture(autouse=True)
def reset_logger():
    """Rebind the project logger to the current stdout after each test."""
    yield
    configure(level="INFO")
