"""CS:GO status client: runs the status command and parses the reply."""

from __future__ import annotations

import inspect
import logging
from typing import Optional

from statusapi.adapters.base import RemoteExecutor
from statusapi.adapters.csgo.status import ServerStatus
from statusapi.adapters.csgo.status_parser import CSGOStatusParser

# Dumps the game_* cvars and the status block in one round trip.
STATUS_COMMAND = "cvarlist game_; status"


class CSGOStatusClient:
    """
    Fetches the live status of a CS:GO server.

    The executor is the only I/O dependency. ``TransportError`` raised by it
    propagates unchanged and no status is produced in that case.
    """

    def __init__(
        self,
        executor: RemoteExecutor,
        parser: Optional[CSGOStatusParser] = None,
    ) -> None:
        self.executor = executor
        self.parser = parser or CSGOStatusParser()
        self.logger = logging.getLogger(__name__)

    async def get_status(self) -> ServerStatus:
        """Run the status command and return the parsed status.

        Raises:
            TransportError: If the remote command could not be executed.
        """
        raw = await self.executor.execute(STATUS_COMMAND)
        status = self.parser.parse(raw)
        self.logger.debug(
            f"Status: map={status.map_name!r} mode={status.game_mode!r} "
            f"humans={status.player_count} bots={status.bot_count}"
        )
        return status

    async def close(self) -> None:
        """Close the executor if it holds resources."""
        close = getattr(self.executor, "close", None)
        if close is None:
            return
        result = close()
        if inspect.isawaitable(result):
            await result
