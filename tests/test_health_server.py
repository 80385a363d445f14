import asyncio
from types import SimpleNamespace

from aiohttp import test_utils

from health_server import build_health_app


def _get(app, path):
    async def runner():
        async with test_utils.TestClient(test_utils.TestServer(app)) as client:
            resp = await client.get(path)
            if resp.content_type == "application/json":
                return resp.status, await resp.json()
            return resp.status, await resp.text()

    return asyncio.run(runner())


def test_root_ok():
    assert _get(build_health_app(), "/") == (200, "OK")


def test_health_reports_uptime():
    status, body = _get(build_health_app(), "/health")
    assert status == 200
    assert body["status"] == "healthy"
    assert body["uptime_seconds"] >= 0
    assert "discord_ready" not in body


def test_health_reports_discord_state():
    bot = SimpleNamespace(is_ready=lambda: True)
    status, body = _get(build_health_app(bot), "/health")
    assert body["discord_ready"] is True
