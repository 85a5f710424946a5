from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Environment-driven overrides for client and logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FOREMAN_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TFFOREMAN_PROFILE", "FOREMAN_PROFILE"),
    )

    server_url: str | None = Field(default=None, validation_alias=AliasChoices("FOREMAN_SERVER_URL"))
    username: str | None = Field(default=None, validation_alias=AliasChoices("FOREMAN_USERNAME", "FOREMAN_USER"))
    password: SecretStr | None = Field(default=None, validation_alias=AliasChoices("FOREMAN_PASSWORD"))
    client_tls_insecure: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("FOREMAN_CLIENT_TLS_INSECURE"),
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices("FOREMAN_REQUEST_TIMEOUT_SECONDS"),
    )

    log_level: str = Field(default="WARNING", validation_alias=AliasChoices("FOREMAN_PROVIDER_LOGLEVEL"))
    log_file: Path | None = Field(default=None, validation_alias=AliasChoices("FOREMAN_PROVIDER_LOGFILE"))
