"""The ``foreman_organization`` resource and data source."""

from __future__ import annotations

import logging

from tfforeman.constants import META_ATTRIBUTE, META_EXAMPLE, META_SUMMARY
from tfforeman.errors import NotFoundError, QueryError, ResourceIdError, ResourceImportError
from tfforeman.models.organizations import ForemanOrganization
from tfforeman.provider.context import ProviderContext
from tfforeman.provider.objects import build_foreman_object, parse_id
from tfforeman.provider.schema import (
    Resource,
    ResourceData,
    Schema,
    ValueType,
    data_source_schema_from_resource_schema,
    import_state_passthrough,
)

logger = logging.getLogger(__name__)


def resource_foreman_organization() -> Resource:
    return Resource(
        create=resource_foreman_organization_create,
        read=resource_foreman_organization_read,
        update=resource_foreman_organization_update,
        delete=resource_foreman_organization_delete,
        importer=resource_foreman_organization_import,
        schema={
            META_ATTRIBUTE: Schema(
                type=ValueType.BOOL,
                computed=True,
                description=f"{META_SUMMARY} A puppet organization, branch.",
            ),
            "name": Schema(
                type=ValueType.STRING,
                required=True,
                description=(
                    "Name of the organization. Usually maps to the name of a puppet branch. "
                    f'{META_EXAMPLE} "production"'
                ),
            ),
        },
    )


def data_source_foreman_organization() -> Resource:
    ds = data_source_schema_from_resource_schema(resource_foreman_organization().schema)
    ds["name"] = Schema(
        type=ValueType.STRING,
        required=True,
        description=f'The name of the puppet branch, environment. {META_EXAMPLE} "production"',
    )
    return Resource(read=data_source_foreman_organization_read, schema=ds)


# Conversion helpers -------------------------------------------------------------


def build_foreman_organization(d: ResourceData) -> ForemanOrganization:
    """Construct a ForemanOrganization from resource data; unset attributes stay zero."""

    obj = build_foreman_object(d)
    return ForemanOrganization(id=obj.id, name=obj.name)


def set_resource_data_from_foreman_organization(d: ResourceData, organization: ForemanOrganization) -> None:
    d.set_id(str(organization.id))
    d.set("name", organization.name)


# Resource lifecycle -------------------------------------------------------------


def resource_foreman_organization_create(d: ResourceData, ctx: ProviderContext) -> None:
    organization = build_foreman_organization(d)
    logger.debug("ForemanOrganization: [%r]", organization)

    created = ctx.client.organizations.create(organization)
    logger.debug("Created ForemanOrganization: [%r]", created)

    set_resource_data_from_foreman_organization(d, created)


def resource_foreman_organization_read(d: ResourceData, ctx: ProviderContext) -> None:
    organization = build_foreman_organization(d)
    logger.debug("ForemanOrganization: [%r]", organization)

    try:
        found = ctx.client.organizations.read(organization.id)
    except NotFoundError:
        logger.info("organization %s no longer exists, removing from state", d.id)
        d.set_id("")
        return

    logger.debug("Read ForemanOrganization: [%r]", found)
    set_resource_data_from_foreman_organization(d, found)


def resource_foreman_organization_update(d: ResourceData, ctx: ProviderContext) -> None:
    organization = build_foreman_organization(d)
    logger.debug("ForemanOrganization: [%r]", organization)

    updated = ctx.client.organizations.update(organization)
    logger.debug("Updated ForemanOrganization: [%r]", updated)

    set_resource_data_from_foreman_organization(d, updated)


def resource_foreman_organization_delete(d: ResourceData, ctx: ProviderContext) -> None:
    organization = build_foreman_organization(d)
    logger.debug("ForemanOrganization: [%r]", organization)

    ctx.client.organizations.delete(organization.id)
    d.set_id("")


def resource_foreman_organization_import(d: ResourceData, ctx: ProviderContext) -> list[ResourceData]:
    try:
        organization_id = parse_id(d.id)
    except ResourceIdError:
        raise ResourceImportError(f"organization import id must be numeric, got {d.id!r}") from None
    if organization_id <= 0:
        raise ResourceImportError(f"organization import id must be a positive integer, got {d.id!r}")
    return import_state_passthrough(d, ctx)


# Data source --------------------------------------------------------------------


def data_source_foreman_organization_read(d: ResourceData, ctx: ProviderContext) -> None:
    organization = build_foreman_organization(d)
    logger.debug("ForemanOrganization: [%r]", organization)

    response = ctx.client.organizations.query(organization)

    if response.subtotal == 0:
        raise QueryError("Data source organization returned no results")
    if response.subtotal > 1:
        raise QueryError("Data source organization returned more than 1 result")

    result = response.results[0] if response.results else None
    if not isinstance(result, ForemanOrganization):
        raise QueryError(
            "Data source results contain unexpected type. Expected "
            f"[ForemanOrganization], got [{type(result).__name__}]"
        )

    logger.debug("ForemanOrganization: [%r]", result)
    set_resource_data_from_foreman_organization(d, result)
