"""Remote console transports and game status parsers."""

from statusapi.adapters.base import (
    RemoteExecutor,
    TransportConfig,
    TransportError,
    TransportType,
)
from statusapi.adapters.registry import (
    TransportRegistry,
    register_default_transports,
)

__all__ = [
    "RemoteExecutor",
    "TransportConfig",
    "TransportError",
    "TransportType",
    "TransportRegistry",
    "register_default_transports",
]
