"""aiohttp application serving game server status as JSON."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from aiohttp import web

from statusapi.adapters.base import TransportError
from statusapi.adapters.csgo.client import CSGOStatusClient

logger = logging.getLogger(__name__)

STATUS_CLIENT_KEY = web.AppKey("csgo_status_client", CSGOStatusClient)

INTERNAL_ERROR_BODY = '{"status": "internal server error"}'
ROBOTS_TXT = "User-Agent: *\nDisallow: /\n"

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def _remote_addr(request: web.Request) -> str:
    return request.headers.get("CF-Connecting-IP") or "(local)"


@web.middleware
async def request_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Log each request and mark every response as not indexable."""
    logger.info(f'{request.method} "{request.path}" from {_remote_addr(request)}')
    try:
        response = await handler(request)
    except web.HTTPException as e:
        e.headers["X-Robots-Tag"] = "noindex"
        raise
    response.headers["X-Robots-Tag"] = "noindex"
    return response


async def handle_csgo(request: web.Request) -> web.Response:
    """Return the CS:GO server status, or a generic 500 on transport failure."""
    client = request.app[STATUS_CLIENT_KEY]
    try:
        status = await client.get_status()
    except TransportError as e:
        logger.error(f"CS:GO status unavailable: {e}")
        return web.Response(
            status=500,
            text=INTERNAL_ERROR_BODY,
            content_type="application/json",
        )

    return web.json_response(
        status.to_dict(),
        headers={"Cache-Control": "public, max-age=5"},
    )


async def handle_robots(request: web.Request) -> web.Response:
    return web.Response(text=ROBOTS_TXT, content_type="text/plain")


def create_app(status_client: CSGOStatusClient) -> web.Application:
    """Build the web application around a status client.

    The client is closed when the application shuts down.
    """
    app = web.Application(middlewares=[request_middleware])
    app[STATUS_CLIENT_KEY] = status_client

    app.router.add_get("/csgo", handle_csgo)
    app.router.add_get("/robots.txt", handle_robots)

    async def close_status_client(app: web.Application) -> None:
        await app[STATUS_CLIENT_KEY].close()

    app.on_cleanup.append(close_status_client)
    return app
