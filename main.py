import argparse
import logging

from aiohttp import web

import statusapi.utils.settings as settings
from statusapi.adapters import (
    TransportConfig,
    TransportRegistry,
    register_default_transports,
)
from statusapi.adapters.csgo import CSGOStatusClient
from statusapi.server.app import create_app

# journald adds its own timestamps
LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"
if not settings.under_journald:
    LOG_FORMAT = "%(asctime)s - " + LOG_FORMAT

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

logger = logging.getLogger("StatusAPI")

# Register available transports
register_default_transports()


def create_transport_config() -> TransportConfig:
    """Create transport configuration from settings."""
    if settings.csgo_transport == "rcon":
        return TransportConfig(
            transport="rcon",
            host=settings.csgo_rcon_host,
            port=settings.csgo_rcon_port,
            password=settings.csgo_rcon_password,
            timeout=settings.csgo_timeout,
        )
    return TransportConfig(
        transport=settings.csgo_transport,
        url=settings.csgo_exec_url,
        timeout=settings.csgo_timeout,
    )


def parse_listen_address(value: str) -> tuple[str, int]:
    """Parse "HOST:PORT" or ":PORT" into a (host, port) pair."""
    host, sep, port = value.rpartition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {value!r}")
    try:
        return host or settings.listen_host, int(port)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port in {value!r}") from None


def main():
    """Main execution function."""
    parser = argparse.ArgumentParser(description="Game server status API")
    parser.add_argument(
        "-l",
        "--listen",
        type=parse_listen_address,
        default=(settings.listen_host, settings.listen_port),
        help="listen address as HOST:PORT (default: %(default)s)",
    )
    args = parser.parse_args()
    host, port = args.listen

    config = create_transport_config()
    executor = TransportRegistry.create(config)
    app = create_app(CSGOStatusClient(executor))

    logger.info("Starting status API")
    logger.info(f"CS:GO transport: {config.transport.upper()}")
    web.run_app(app, host=host, port=port, print=None)


if __name__ == "__main__":
    main()
