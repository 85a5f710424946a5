from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from tfforeman.client import ForemanClient
from tfforeman.errors import ConfigError
from tfforeman.provider.context import ProviderContext
from tfforeman.provider.organization import (
    data_source_foreman_organization,
    resource_foreman_organization,
)
from tfforeman.provider.schema import Resource, Schema, ValueType, validate_attributes

logger = logging.getLogger(__name__)


class Provider:
    """Foreman provider: provider-level settings plus resource and data-source registries."""

    def __init__(self) -> None:
        self.schema: dict[str, Schema] = {
            "server_url": Schema(
                type=ValueType.STRING,
                optional=True,
                description="URL of the Foreman server, e.g. https://foreman.example.com",
            ),
            "username": Schema(type=ValueType.STRING, optional=True, description="Foreman API username"),
            "password": Schema(
                type=ValueType.STRING,
                optional=True,
                description="Foreman API password",
            ),
            "client_tls_insecure": Schema(
                type=ValueType.BOOL,
                optional=True,
                description="Skip TLS certificate verification",
            ),
        }
        self.resources: dict[str, Resource] = {
            "foreman_organization": resource_foreman_organization(),
        }
        self.data_sources: dict[str, Resource] = {
            "foreman_organization": data_source_foreman_organization(),
        }

    def resource(self, name: str) -> Resource:
        try:
            return self.resources[name]
        except KeyError:
            raise ConfigError(f"unknown resource type: {name}") from None

    def data_source(self, name: str) -> Resource:
        try:
            return self.data_sources[name]
        except KeyError:
            raise ConfigError(f"unknown data source: {name}") from None

    def configure(
        self,
        attributes: Mapping[str, Any] | None = None,
        *,
        profile: str | None = None,
        config_path: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> ProviderContext:
        """Validate provider settings and build the context handed to callbacks.

        Unset settings fall back to ``FOREMAN_*`` environment variables, then the
        selected config profile.
        """

        settings = dict(attributes or {})
        validate_attributes(self.schema, settings)

        client = ForemanClient(
            config_path=config_path,
            profile=profile,
            server_url=settings.get("server_url"),
            username=settings.get("username"),
            password=settings.get("password"),
            client_tls_insecure=settings.get("client_tls_insecure"),
            http_client=http_client,
        )
        logger.info("configured Foreman provider for %s", client.server_url)
        return ProviderContext(client=client)
