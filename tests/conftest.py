"""Shared pytest fixtures for status API tests."""

from __future__ import annotations

import pytest

from statusapi.adapters.base import TransportError

# Reply to "cvarlist game_; status" as printed by a CS:GO dedicated server.
CSGO_STATUS_REPLY = """\
cvar list
--------------
game_mode                                : 1        : , "sv", "rep"    : Current game mode
game_online                              : cmd      :                  : Show whether a game is online
game_type                                : 0        : , "sv", "rep"    : Current game type
--------------
  3 convars/concommands for [game_]
hostname: USTC CS:GO
version : 1.38.7.9/13879 1575/8853 secure  [G:1:4208931]
udp/ip  : 0.0.0.0:27015  (public ip: 202.38.64.1)
os      :  Linux
type    :  community dedicated
map     : de_mirage
gotv[0]:  port 27020, delay 30.0s, rate 64.0
players : 2 humans, 2 bots (12/0 max) (not hibernating)

# userid name uniqueid connected ping loss state rate
# 2 1 "Alice" STEAM_1:1:1234 10:03 45 0 active 196608
# 3 "Bot Dave" BOT active 64
# 4 2 "Bob the Builder" STEAM_1:0:5678 02:11 80 0 active 196608
# 5 "Bot Eve" BOT active 64
#end
"""


class FakeExecutor:
    """RemoteExecutor returning a canned reply and recording commands."""

    def __init__(self, reply: str = CSGO_STATUS_REPLY, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.commands: list[str] = []
        self.closed = False

    async def execute(self, command: str) -> str:
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def status_reply():
    """Realistic console reply for the CS:GO status command."""
    return CSGO_STATUS_REPLY


@pytest.fixture
def fake_executor():
    """Executor answering with the canned status reply."""
    return FakeExecutor()


@pytest.fixture
def failing_executor():
    """Executor whose every call fails at the transport level."""
    return FakeExecutor(error=TransportError("connection refused"))


@pytest.fixture
def make_executor():
    """Factory for executors with a custom reply or error."""
    return FakeExecutor
