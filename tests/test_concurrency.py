from __future__ import annotations

import asyncio
import time

import httpx

import app.api.routes.user_routes as user_routes
from app.main import app


def test_slow_query_does_not_block_other_requests(client, monkeypatch):
    real_fetch_all = user_routes.fetch_all

    def slow_fetch_all(db, sql, params=None):
        time.sleep(0.5)
        return real_fetch_all(db, sql, params)

    monkeypatch.setattr(user_routes, "fetch_all", slow_fetch_all)

    async def run_both():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            started = time.perf_counter()
            slow = asyncio.create_task(ac.get("/users"))
            await asyncio.sleep(0.05)
            fast = await ac.get("/")
            fast_elapsed = time.perf_counter() - started
            return await slow, fast, fast_elapsed

    slow, fast, fast_elapsed = asyncio.run(run_both())

    assert slow.status_code == 200
    assert slow.json() == []
    assert fast.status_code == 200
    assert fast_elapsed < 0.3
