"""CS:GO server status record and game mode table."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

UNKNOWN_GAME_MODE = "unknown"

# Keyed by game_type * 100 + game_mode.
# Source: https://totalcsgo.com/command/gamemode
GAME_MODES: Mapping[int, str] = MappingProxyType(
    {
        0: "casual",
        1: "competitive",
        2: "scrim competitive",
        100: "arms race",
        101: "demolition",
        102: "deathmatch",
        200: "training",
        300: "custom",
        400: "cooperative",
        500: "skirmish",
    }
)


def game_mode_name(game_type: int, game_mode: int) -> str:
    """Resolve the ``game_type``/``game_mode`` cvar pair to a mode name.

    Args:
        game_type: Value of the ``game_type`` cvar.
        game_mode: Value of the ``game_mode`` cvar.

    Returns:
        The mode name, or ``"unknown"`` for combinations not in the table.
    """
    return GAME_MODES.get(game_type * 100 + game_mode, UNKNOWN_GAME_MODE)


@dataclass
class ServerStatus:
    """Normalized status of a CS:GO server.

    Attributes:
        map_name: Current map, empty when the server did not report one.
        game_mode: Mode name derived from the game_type/game_mode cvars.
        player_count: Humans, as reported by the ``players`` summary line.
        bot_count: Bots, as reported by the ``players`` summary line.
        players: Human player names in the order the server listed them.
        game_mode_cvar: Raw ``game_mode`` cvar. Not serialized.
        game_type_cvar: Raw ``game_type`` cvar. Not serialized.
    """

    map_name: str = ""
    game_mode: str = UNKNOWN_GAME_MODE
    player_count: int = 0
    bot_count: int = 0
    players: List[str] = field(default_factory=list)

    game_mode_cvar: int = field(default=0, repr=False)
    game_type_cvar: int = field(default=0, repr=False)

    def resolve_game_mode(self) -> str:
        """Derive ``game_mode`` from the raw cvars and store it."""
        self.game_mode = game_mode_name(self.game_type_cvar, self.game_mode_cvar)
        return self.game_mode

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable form served to API clients."""
        return {
            "map": self.map_name,
            "game_mode": self.game_mode,
            "player_count": self.player_count,
            "bot_count": self.bot_count,
            "players": list(self.players),
        }
