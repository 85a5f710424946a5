from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tfforeman.constants import ORGANIZATION_ENDPOINT_PREFIX
from tfforeman.errors import RequestError
from tfforeman.models.common import QueryResponse
from tfforeman.models.organizations import ForemanOrganization
from tfforeman.services.base import ServiceBase

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def quote_search_value(value: str) -> str:
    """Quote a value for a scoped-search expression, escaping ``\\`` and ``"``."""

    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _decode(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RequestError(f"unexpected response payload for {model.__name__}: {exc}") from exc


class OrganizationsService(ServiceBase):
    """Organization API operations."""

    async def create(self, organization: ForemanOrganization) -> ForemanOrganization:
        """Create an organization and return it with the server-assigned id."""

        logger.debug("organizations.create")
        data = await self._client._request_json(
            "POST",
            f"/{ORGANIZATION_ENDPOINT_PREFIX}",
            json_data=organization.to_payload(include_id=False),
        )
        created = _decode(ForemanOrganization, data)
        logger.debug("created organization: [%r]", created)
        return created

    async def read(self, organization_id: int) -> ForemanOrganization:
        logger.debug("organizations.read")
        data = await self._client._request_json(
            "GET",
            f"/{ORGANIZATION_ENDPOINT_PREFIX}/{organization_id}",
        )
        found = _decode(ForemanOrganization, data)
        logger.debug("read organization: [%r]", found)
        return found

    async def update(self, organization: ForemanOrganization) -> ForemanOrganization:
        """Update the organization identified by ``organization.id``."""

        logger.debug("organizations.update")
        data = await self._client._request_json(
            "PUT",
            f"/{ORGANIZATION_ENDPOINT_PREFIX}/{organization.id}",
            json_data=organization.to_payload(),
        )
        updated = _decode(ForemanOrganization, data)
        logger.debug("updated organization: [%r]", updated)
        return updated

    async def delete(self, organization_id: int) -> None:
        logger.debug("organizations.delete")
        await self._client._request_json(
            "DELETE",
            f"/{ORGANIZATION_ENDPOINT_PREFIX}/{organization_id}",
        )

    async def query(self, organization: ForemanOrganization) -> QueryResponse[ForemanOrganization]:
        """Search organizations whose name exactly matches ``organization.name``."""

        logger.debug("organizations.query")
        data = await self._client._request_json(
            "GET",
            f"/{ORGANIZATION_ENDPOINT_PREFIX}",
            params={"search": f"name={quote_search_value(organization.name)}"},
        )
        response = _decode(QueryResponse[ForemanOrganization], data)
        logger.debug("query response: subtotal=%d results=%d", response.subtotal, len(response.results))
        return response
