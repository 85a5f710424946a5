from __future__ import annotations

from dataclasses import dataclass


class ForemanError(Exception):
    """Base error type for the tfforeman SDK."""


class ConfigError(ForemanError):
    """Raised when configuration cannot be loaded or validated."""


class RequestError(ForemanError):
    """Raised when an HTTP request cannot be sent or its response decoded."""


@dataclass
class APIError(RequestError):
    """Represents a non-success Foreman API response."""

    status_code: int
    message: str
    body: str | None = None

    def __str__(self) -> str:
        if self.body:
            return f"HTTP {self.status_code}: {self.message} ({self.body})"
        return f"HTTP {self.status_code}: {self.message}"


class NotFoundError(APIError):
    """Raised when Foreman reports the requested object does not exist."""


class QueryError(ForemanError):
    """Raised when a lookup does not resolve to exactly one object."""


class ResourceImportError(ForemanError):
    """Raised when an import id cannot identify a Foreman object."""


class ResourceIdError(ForemanError):
    """Raised when a resource id held in state is not a Foreman numeric id."""
