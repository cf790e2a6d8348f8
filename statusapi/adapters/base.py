"""Shared transport types for remote console execution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class TransportError(Exception):
    """Raised when a remote command could not be executed."""

    pass


class TransportType(Enum):
    """How commands reach the game server console."""

    HTTP = "http"  # JSON exec endpoint in front of the server console
    RCON = "rcon"  # Source RCON TCP protocol


@runtime_checkable
class RemoteExecutor(Protocol):
    """Capability for running one console command on a game server.

    Implementations send ``command`` and return the full textual reply.
    Any transport failure (refused connection, timeout, protocol error)
    is raised as ``TransportError``.
    """

    async def execute(self, command: str) -> str: ...


@dataclass
class TransportConfig:
    """Configuration for building a RemoteExecutor."""

    transport: str = TransportType.HTTP.value
    url: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 27015
    password: Optional[str] = None
    timeout: float = 10.0
