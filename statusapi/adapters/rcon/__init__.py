"""Source RCON transport."""

from statusapi.adapters.rcon.rcon_client import RCONPacket, SourceRCONClient

__all__ = [
    "RCONPacket",
    "SourceRCONClient",
]
