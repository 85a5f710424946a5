from __future__ import annotations

from dataclasses import dataclass

from tfforeman.client import ForemanClient


@dataclass
class ProviderContext:
    """Handles shared by every lifecycle callback of a configured provider."""

    client: ForemanClient

    def close(self) -> None:
        self.client.close()
