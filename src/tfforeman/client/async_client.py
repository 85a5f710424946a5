from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, TypeVar

import httpx
from pydantic import SecretStr

from tfforeman.config import ConfigInput, SDKConfig, load_config, select_profile
from tfforeman.errors import ConfigError
from tfforeman.http import ForemanTransport
from tfforeman.services import OrganizationsService
from tfforeman.settings import RuntimeSettings

logger = logging.getLogger(__name__)

RequestParams = Mapping[str, str | int | float | bool]

T = TypeVar("T")


def _first_set(*values: T | None) -> T | None:
    """Return the first value that is not None; explicit False and 0 count as set."""

    for value in values:
        if value is not None:
            return value
    return None


def _plain_password(value: SecretStr | None) -> str | None:
    return value.get_secret_value() or None if value is not None else None


class AsyncForemanClient:
    """Async Foreman API client.

    Each setting comes from the constructor argument when given, then the
    ``FOREMAN_*`` environment, then the selected profile.
    """

    def __init__(
        self,
        config: ConfigInput | None = None,
        *,
        config_path: str | Path | None = None,
        profile: str | None = None,
        server_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        client_tls_insecure: bool | None = None,
        request_timeout_seconds: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        env = RuntimeSettings()
        self.config: SDKConfig = load_config(config, config_path=config_path).data
        self._profile_name, chosen = select_profile(self.config, profile or env.profile)

        self.server_url = server_url or env.server_url or chosen.server_url
        if not self.server_url:
            raise ConfigError("server_url is required (set FOREMAN_SERVER_URL or configure a profile)")

        self.username = username or env.username or chosen.username
        password = password or _plain_password(env.password) or _plain_password(chosen.password)
        self.client_tls_insecure = _first_set(client_tls_insecure, env.client_tls_insecure, chosen.client_tls_insecure)
        self.request_timeout_seconds = _first_set(
            request_timeout_seconds, env.request_timeout_seconds, chosen.request_timeout_seconds
        )

        logger.debug(
            "client for %s (profile=%s, user=%s, insecure=%s)",
            self.server_url,
            self._profile_name,
            self.username,
            self.client_tls_insecure,
        )
        self._transport = ForemanTransport(
            server_url=self.server_url,
            timeout=self.request_timeout_seconds,
            verify_tls=not self.client_tls_insecure,
            username=self.username,
            password=password,
            http_client=http_client,
        )

        self._organizations: OrganizationsService | None = None

    @property
    def profile_name(self) -> str:
        return self._profile_name

    @property
    def organizations(self) -> OrganizationsService:
        if self._organizations is None:
            self._organizations = OrganizationsService(self)
        return self._organizations

    async def __aenter__(self) -> AsyncForemanClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: RequestParams | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self._transport.request_json(
            method,
            path,
            params=params,
            json_data=json_data,
        )


@asynccontextmanager
async def connect(*args: Any, **kwargs: Any):
    client = AsyncForemanClient(*args, **kwargs)
    try:
        yield client
    finally:
        await client.aclose()
