"""HTTP exec API transport."""

from statusapi.adapters.exec_api.exec_api_client import ExecAPIClient

__all__ = [
    "ExecAPIClient",
]
