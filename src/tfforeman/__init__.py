__version__ = "0.1.0"

from tfforeman.client import AsyncForemanClient, ForemanClient, connect  # noqa: E402
from tfforeman.config.models import ProfileConfig, SDKConfig  # noqa: E402
from tfforeman.errors import (  # noqa: E402
    APIError,
    ConfigError,
    ForemanError,
    NotFoundError,
    QueryError,
    RequestError,
    ResourceIdError,
    ResourceImportError,
)
from tfforeman.log import configure_logging  # noqa: E402
from tfforeman.models import ForemanObject, ForemanOrganization, QueryResponse  # noqa: E402
from tfforeman.provider import Provider, ProviderContext, ResourceData  # noqa: E402

__all__ = [
    "__version__",
    "APIError",
    "AsyncForemanClient",
    "ConfigError",
    "ForemanClient",
    "ForemanError",
    "ForemanObject",
    "ForemanOrganization",
    "NotFoundError",
    "ProfileConfig",
    "Provider",
    "ProviderContext",
    "QueryError",
    "QueryResponse",
    "RequestError",
    "ResourceData",
    "ResourceIdError",
    "ResourceImportError",
    "SDKConfig",
    "configure_logging",
    "connect",
]
