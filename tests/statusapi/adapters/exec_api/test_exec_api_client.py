"""Tests for ExecAPIClient against an in-process aiohttp exec endpoint."""

from __future__ import annotations

import asyncio

import pytest
from aiohttp import test_utils, web

from statusapi.adapters.base import TransportError
from statusapi.adapters.exec_api.exec_api_client import ExecAPIClient


def _make_exec_app(received: list, reply: str = "map: de_dust2\n", status: int = 200):
    async def handle_exec(request: web.Request) -> web.Response:
        received.append(await request.json())
        return web.Response(status=status, text=reply)

    async def handle_slow(request: web.Request) -> web.Response:
        await asyncio.sleep(1)
        return web.Response(text="too late")

    app = web.Application()
    app.router.add_post("/api/exec/", handle_exec)
    app.router.add_post("/slow/", handle_slow)
    return app


def _run_against(app: web.Application, scenario):
    """Start ``app`` on a test server and run ``scenario(server)``."""

    async def run():
        async with test_utils.TestServer(app) as server:
            return await scenario(server)

    return asyncio.run(run())


class TestExecute:
    """Successful command execution."""

    def test_posts_command_as_json(self):
        received = []

        async def scenario(server):
            client = ExecAPIClient(str(server.make_url("/api/exec/")), timeout=2.0)
            try:
                return await client.execute("cvarlist game_; status")
            finally:
                await client.close()

        reply = _run_against(_make_exec_app(received), scenario)

        assert received == [{"cmd": "cvarlist game_; status"}]
        assert reply == "map: de_dust2\n"

    def test_reuses_session(self):
        received = []

        async def scenario(server):
            client = ExecAPIClient(str(server.make_url("/api/exec/")))
            try:
                await client.execute("status")
                first = client._http_session
                await client.execute("status")
                return first is client._http_session
            finally:
                await client.close()

        assert _run_against(_make_exec_app(received), scenario)
        assert len(received) == 2


class TestErrors:
    """Transport failures surface as TransportError."""

    def test_non_200_status(self):
        async def scenario(server):
            client = ExecAPIClient(str(server.make_url("/api/exec/")))
            try:
                await client.execute("status")
            finally:
                await client.close()

        app = _make_exec_app([], reply="boom", status=502)
        with pytest.raises(TransportError, match="502"):
            _run_against(app, scenario)

    def test_timeout(self):
        async def scenario(server):
            client = ExecAPIClient(str(server.make_url("/slow/")), timeout=0.2)
            try:
                await client.execute("status")
            finally:
                await client.close()

        with pytest.raises(TransportError):
            _run_against(_make_exec_app([]), scenario)

    def test_connection_refused(self):
        async def scenario():
            # Bind and release a port so nothing listens on it.
            server = await asyncio.start_server(lambda r, w: None, "127.0.0.1", 0)
            port = server.sockets[0].getsockname()[1]
            server.close()
            await server.wait_closed()

            client = ExecAPIClient(f"http://127.0.0.1:{port}/api/exec/", timeout=2.0)
            try:
                await client.execute("status")
            finally:
                await client.close()

        with pytest.raises(TransportError, match="HTTP error"):
            asyncio.run(scenario())


class TestClose:
    def test_close_without_session(self):
        asyncio.run(ExecAPIClient("http://127.0.0.1:1/").close())

    def test_close_closes_session(self):
        received = []

        async def scenario(server):
            client = ExecAPIClient(str(server.make_url("/api/exec/")))
            await client.execute("status")
            session = client._http_session
            await client.close()
            return session.closed

        assert _run_against(_make_exec_app(received), scenario)
