"""CS:GO status parsing and client."""

from statusapi.adapters.csgo.client import STATUS_COMMAND, CSGOStatusClient
from statusapi.adapters.csgo.status import (
    GAME_MODES,
    UNKNOWN_GAME_MODE,
    ServerStatus,
    game_mode_name,
)
from statusapi.adapters.csgo.status_parser import CSGOStatusParser

__all__ = [
    "GAME_MODES",
    "STATUS_COMMAND",
    "UNKNOWN_GAME_MODE",
    "CSGOStatusClient",
    "CSGOStatusParser",
    "ServerStatus",
    "game_mode_name",
]
