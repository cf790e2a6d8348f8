"""Named transports for reaching a game server console."""

import logging
from typing import Callable, Dict

from statusapi.adapters.base import RemoteExecutor, TransportConfig

logger = logging.getLogger(__name__)

TransportFactory = Callable[[TransportConfig], RemoteExecutor]


class TransportRegistry:
    """
    Maps transport names ("http", "rcon") to factories building executors.

    ``TransportConfig.transport`` picks the entry; the factory reads only the
    config fields its transport needs (URL for http, host/port/password for
    rcon). Names are case-insensitive.
    """

    _transports: Dict[str, TransportFactory] = {}

    @classmethod
    def register(cls, transport: str, factory: TransportFactory) -> None:
        cls._transports[transport.lower()] = factory
        name = getattr(factory, "__name__", repr(factory))
        logger.debug(f"Transport '{transport.lower()}' -> {name}")

    @classmethod
    def create(cls, config: TransportConfig) -> RemoteExecutor:
        """Build the executor named by ``config.transport``.

        Raises:
            ValueError: If no transport of that name is registered, or the
                factory rejects the config.
        """
        name = config.transport.lower()
        factory = cls._transports.get(name)
        if factory is None:
            known = ", ".join(sorted(cls._transports)) or "none"
            raise ValueError(f"Unknown transport: {name}. Known transports: {known}")

        logger.info(f"Using {name} transport (timeout {config.timeout}s)")
        return factory(config)

    @classmethod
    def get_available_transports(cls) -> list:
        return sorted(cls._transports)

    @classmethod
    def is_registered(cls, transport: str) -> bool:
        return transport.lower() in cls._transports


def _create_exec_api_client(config: TransportConfig) -> RemoteExecutor:
    from statusapi.adapters.exec_api.exec_api_client import ExecAPIClient

    if not config.url:
        raise ValueError("The http transport requires an exec URL.")
    return ExecAPIClient(url=config.url, timeout=config.timeout)


def _create_rcon_client(config: TransportConfig) -> RemoteExecutor:
    from statusapi.adapters.rcon.rcon_client import SourceRCONClient

    return SourceRCONClient(
        host=config.host,
        port=config.port,
        password=config.password,
        timeout=config.timeout,
    )


def register_default_transports() -> None:
    """Register the HTTP exec tunnel and Source RCON transports."""
    TransportRegistry.register("http", _create_exec_api_client)
    TransportRegistry.register("rcon", _create_rcon_client)
