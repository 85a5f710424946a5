"""Client entrypoints."""

from tfforeman.client.async_client import AsyncForemanClient, connect
from tfforeman.client.sync_client import ForemanClient

__all__ = [
    "AsyncForemanClient",
    "ForemanClient",
    "connect",
]
