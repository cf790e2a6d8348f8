"""Source RCON client for running console commands over TCP.

Packet layout (all integers little-endian int32):

    size | request id | type | body | 0x00 0x00

``size`` counts everything after itself. A long command output is split
across several SERVERDATA_RESPONSE_VALUE packets; the end is found by
sending an empty SERVERDATA_RESPONSE_VALUE after the command and reading
until the server mirrors its request id.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
import struct
from dataclasses import dataclass
from typing import List, Optional

from statusapi.adapters.base import TransportError

SERVERDATA_AUTH = 3
SERVERDATA_AUTH_RESPONSE = 2
SERVERDATA_EXECCOMMAND = 2
SERVERDATA_RESPONSE_VALUE = 0

AUTH_FAILED_ID = -1

MIN_PACKET_SIZE = 10  # id + type + two NULs
MAX_PACKET_SIZE = 4096 + MIN_PACKET_SIZE


@dataclass
class RCONPacket:
    """Single RCON packet."""

    request_id: int
    packet_type: int
    body: bytes = b""

    def encode(self) -> bytes:
        """Serialize to wire format, including the size prefix."""
        payload = (
            struct.pack("<ii", self.request_id, self.packet_type) + self.body + b"\x00\x00"
        )
        return struct.pack("<i", len(payload)) + payload

    @classmethod
    def decode(cls, data: bytes) -> "RCONPacket":
        """Build a packet from the bytes following the size prefix."""
        if len(data) < MIN_PACKET_SIZE:
            raise TransportError(f"Malformed RCON packet: {len(data)} bytes")
        request_id, packet_type = struct.unpack("<ii", data[:8])
        return cls(request_id=request_id, packet_type=packet_type, body=data[8:-2])


async def read_packet(reader: asyncio.StreamReader) -> RCONPacket:
    """Read one packet from the stream.

    Raises:
        TransportError: If the announced size is out of range.
        asyncio.IncompleteReadError: If the peer closes mid-packet.
    """
    (size,) = struct.unpack("<i", await reader.readexactly(4))
    if size < MIN_PACKET_SIZE or size > MAX_PACKET_SIZE:
        raise TransportError(f"Malformed RCON packet: size {size}")
    return RCONPacket.decode(await reader.readexactly(size))


class SourceRCONClient:
    """
    RCON client for Source engine dedicated servers.

    Each ``execute`` call opens its own TCP connection, authenticates, runs
    the command and disconnects, so concurrent calls never share a socket.
    The whole exchange is bounded by ``timeout``.
    """

    def __init__(
        self,
        host: str,
        port: int = 27015,
        password: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.password = password or ""
        self.timeout = timeout

        self._request_ids = itertools.count(1)
        self.logger = logging.getLogger(__name__)

    async def execute(self, command: str) -> str:
        """
        Run a console command over RCON.

        Args:
            command: Console command line

        Returns:
            The full console output, decoded as UTF-8

        Raises:
            TransportError: On connection failure, timeout, protocol error
                or rejected password
        """
        self.logger.debug(f"RCON exec on {self.host}:{self.port}: {command!r}")

        try:
            return await asyncio.wait_for(self._run(command), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(f"RCON timeout after {self.timeout}s") from e
        except asyncio.IncompleteReadError as e:
            raise TransportError("RCON connection closed by server") from e
        except OSError as e:
            raise TransportError(f"RCON connection error: {e}") from e

    async def _run(self, command: str) -> str:
        reader, writer = await asyncio.open_connection(self.host, self.port)
        try:
            await self._authenticate(reader, writer)
            return await self._exec(reader, writer, command)
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError as e:
                self.logger.debug(f"RCON close error (ignored): {e}")

    async def _authenticate(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        request_id = next(self._request_ids)
        writer.write(
            RCONPacket(request_id, SERVERDATA_AUTH, self.password.encode("utf-8")).encode()
        )
        await writer.drain()

        # The server sends an empty SERVERDATA_RESPONSE_VALUE before the auth result.
        while True:
            packet = await read_packet(reader)
            if packet.packet_type == SERVERDATA_AUTH_RESPONSE:
                break

        if packet.request_id == AUTH_FAILED_ID:
            raise TransportError("RCON authentication failed")
        if packet.request_id != request_id:
            raise TransportError(
                f"Unexpected RCON auth response id {packet.request_id}"
            )

    async def _exec(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        command: str,
    ) -> str:
        command_id = next(self._request_ids)
        marker_id = next(self._request_ids)
        writer.write(
            RCONPacket(command_id, SERVERDATA_EXECCOMMAND, command.encode("utf-8")).encode()
        )
        writer.write(RCONPacket(marker_id, SERVERDATA_RESPONSE_VALUE).encode())
        await writer.drain()

        chunks: List[bytes] = []
        while True:
            packet = await read_packet(reader)
            if packet.request_id == marker_id:
                break
            if packet.request_id == command_id:
                chunks.append(packet.body)

        # Multi-byte characters may straddle packet boundaries.
        return b"".join(chunks).decode("utf-8", errors="replace")
