"""Request independence under concurrent load.

Fires many simultaneous requests across every kind of route and verifies
each response matches what the same request returns in isolation.
"""

import asyncio
import random
from pathlib import Path

import httpx
from fastapi import FastAPI

CONCURRENT_REQUESTS = 50

EXPECTED_JSON = {
    "/api/hello": {"message": "Hello World"},
    "/health": {"status": "healthy"},
}


class TestConcurrentRequests:
    """Requests share no state, whatever the interleaving."""

    async def test_mixed_routes_concurrently(self, app: FastAPI, static_root: Path) -> None:
        """Every concurrent response equals its expected constant or file bytes."""
        files = {
            "/index.html": (static_root / "index.html").read_bytes(),
            "/app.js": (static_root / "app.js").read_bytes(),
            "/logo.png": (static_root / "logo.png").read_bytes(),
        }
        urls = [*EXPECTED_JSON, *files, "/missing.txt"]
        plan = [random.choice(urls) for _ in range(CONCURRENT_REQUESTS)]

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            responses = await asyncio.gather(*(client.get(url) for url in plan))

        for url, response in zip(plan, responses, strict=True):
            if url in EXPECTED_JSON:
                assert response.status_code == 200, f"{url} returned {response.status_code}"
                assert response.json() == EXPECTED_JSON[url]
            elif url in files:
                assert response.status_code == 200, f"{url} returned {response.status_code}"
                assert response.content == files[url]
            else:
                assert response.status_code == 404

    async def test_same_route_many_times(self, app: FastAPI) -> None:
        """Hammering one route yields one distinct response body."""
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            responses = await asyncio.gather(
                *(client.get("/health") for _ in range(CONCURRENT_REQUESTS))
            )

        assert {r.status_code for r in responses} == {200}
        assert {r.content for r in responses} == {responses[0].content}
