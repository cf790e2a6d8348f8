"""CS:GO-specific status parsing.

This module provides the CSGOStatusParser class that turns the reply to
``cvarlist game_; status`` into a ServerStatus: map, game mode cvars,
player/bot counts and the names of human players.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from statusapi.adapters.csgo.status import ServerStatus
from statusapi.adapters.status_parser import StatusParser


KEY_VALUE_SEPARATOR = ": "
ROSTER_PREFIX = "#"
BOT_MARKER = "BOT"

# "2 humans, 1 bot (12/0 max) (not hibernating)"
PLAYERS_PATTERN = re.compile(r"(\d+) humans?,\s*(\d+) bots?")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class CSGOStatusParser(StatusParser[ServerStatus]):
    """
    Status parser for the reply to ``cvarlist game_; status`` on CS:GO.

    Example:
        game_mode                                : 1        : , "sv", "rep"    : Current game mode
        game_type                                : 0        : , "sv", "rep"    : Current game type
        hostname: My Server
        map     : de_dust2
        players : 2 humans, 1 bot (12/0 max) (not hibernating)
        # userid name uniqueid connected ping loss state rate
        #  2 1 "Alice" STEAM_1:1:1234 10:03 45 0 active 196608
        #  3 "Bob" BOT active 64
        #end

    Key/value lines fill the map, counts and mode cvars. ``#`` lines are the
    roster; only human names are kept. Counts always come from the
    ``players`` summary line, never from counting roster lines.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def is_roster_line(self, line: str) -> bool:
        """Detect a player roster line."""
        return line.startswith(ROSTER_PREFIX)

    def parse(self, raw: str) -> ServerStatus:
        status = ServerStatus()

        for line in self.iter_lines(raw):
            if self.is_roster_line(line):
                name = self.parse_roster_line(line)
                if name is not None:
                    status.players.append(name)
            else:
                self.apply_key_value_line(status, line)

        status.resolve_game_mode()
        return status

    def apply_key_value_line(self, status: ServerStatus, line: str) -> None:
        """Apply a ``key: value`` line to ``status``; unknown keys are ignored."""
        key, sep, value = line.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            return

        key = key.strip()
        value = value.strip()

        if key == "map":
            status.map_name = value
        elif key == "players":
            counts = self.parse_player_counts(value)
            if counts is None:
                self.logger.debug(f"Unrecognized players summary: '{value}'")
                return
            status.player_count, status.bot_count = counts
        elif key == "game_mode":
            status.game_mode_cvar = self.parse_cvar_int(value)
        elif key == "game_type":
            status.game_type_cvar = self.parse_cvar_int(value)

    def parse_player_counts(self, value: str) -> Optional[tuple[int, int]]:
        """
        Extract (humans, bots) from the ``players`` summary value.

        Handles both singular and plural forms:
        - "0 humans, 10 bots"
        - "1 human, 1 bot (20/0 max) (not hibernating)"
        """
        match = PLAYERS_PATTERN.search(value)
        if not match:
            return None
        return int(match.group(1)), int(match.group(2))

    def parse_cvar_int(self, value: str) -> int:
        """Read an integer cvar value, 0 when it is not numeric.

        ``cvarlist`` rows carry flag and description columns after the
        value (``1 : , "sv", "rep" : Current game mode``); only the first
        column is read.
        """
        column = value.split(":", 1)[0].strip()
        if not INTEGER_PATTERN.fullmatch(column):
            self.logger.debug(f"Non-numeric cvar value: '{value}'")
            return 0
        return int(column)

    def parse_roster_line(self, line: str) -> Optional[str]:
        """
        Return the player name of a roster line, or None for bots and
        lines without a quoted name.

        Formats:
        - Human: #  2 1 "Alice" STEAM_1:1:1234 10:03 45 0 active 196608
        - BOT:   #  3 "Bob" BOT active 64
        - Header lines such as "# userid name uniqueid ..." have no quotes.
        """
        parts = line.split('"', 2)
        if len(parts) != 3:
            return None

        _, name, rest = parts
        tokens = rest.strip().split(" ")
        if tokens[0] == BOT_MARKER:
            return None
        return name
