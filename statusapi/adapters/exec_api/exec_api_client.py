"""HTTP exec API client for running console commands on a game server."""

import asyncio
import logging
from typing import Optional

import aiohttp

from statusapi.adapters.base import TransportError


class ExecAPIClient:
    """
    Async client for an HTTP endpoint that runs console commands.

    The endpoint accepts ``POST`` with a JSON body ``{"cmd": "<command>"}``
    and answers with the raw console output as the response body.
    """

    def __init__(self, url: str, timeout: float = 10.0):
        """
        Initialize exec API client.

        Args:
            url: Exec endpoint URL (e.g., "http://10.0.0.9:8001/api/exec/")
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout

        self._http_session: Optional[aiohttp.ClientSession] = None
        self.logger = logging.getLogger(__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._http_session is None or self._http_session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            headers = {
                "Accept": "text/plain",
                "User-Agent": "statusapi/1.0",
            }
            self._http_session = aiohttp.ClientSession(timeout=timeout, headers=headers)
        return self._http_session

    async def execute(self, command: str) -> str:
        """
        Run a console command through the exec endpoint.

        Args:
            command: Console command line, may hold several ``;``-separated commands

        Returns:
            The console output

        Raises:
            TransportError: If the request fails or the endpoint answers non-200
        """
        session = await self._get_session()

        self.logger.debug(f"Exec call: POST {self.url} cmd={command!r}")

        try:
            async with session.post(self.url, json={"cmd": command}) as response:
                text = await response.text()
                if response.status != 200:
                    raise TransportError(
                        f"Exec call failed: {response.status} - {text[:200]}"
                    )

                self.logger.debug(f"Exec response: {len(text)} bytes")
                return text

        except aiohttp.ClientError as e:
            raise TransportError(f"HTTP error: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timeout after {self.timeout}s") from e

    async def close(self) -> None:
        """Close HTTP session and cleanup."""
        if self._http_session and not self._http_session.closed:
            await self._http_session.close()
