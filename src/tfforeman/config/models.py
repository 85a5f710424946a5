from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr

from tfforeman.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS


class ProfileConfig(BaseModel):
    """Connection settings for one Foreman server."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    server_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("server_url", "serverUrl", "url"),
    )
    username: str | None = Field(default=None, validation_alias=AliasChoices("username", "user"))
    password: SecretStr | None = None
    client_tls_insecure: bool = Field(
        default=False,
        validation_alias=AliasChoices("client_tls_insecure", "clientTlsInsecure", "insecure"),
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        validation_alias=AliasChoices("request_timeout_seconds", "requestTimeoutSeconds"),
    )

    def to_file_data(self) -> dict[str, Any]:
        """Plain mapping written to a config file; the password is stored in clear."""

        data = self.model_dump(exclude_none=True)
        if self.password is not None:
            data["password"] = self.password.get_secret_value()
        return data


class SDKConfig(BaseModel):
    """Named Foreman server profiles plus the one used when none is selected."""

    model_config = ConfigDict(populate_by_name=True)

    default_profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("default_profile", "defaultProfile"),
    )
    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)


class ResolvedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    path: Path | None = None
    data: SDKConfig


ConfigInput = SDKConfig | dict[str, Any]
