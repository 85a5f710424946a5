from tfforeman.provider.context import ProviderContext
from tfforeman.provider.organization import (
    build_foreman_organization,
    data_source_foreman_organization,
    resource_foreman_organization,
    set_resource_data_from_foreman_organization,
)
from tfforeman.provider.provider import Provider
from tfforeman.provider.schema import (
    Resource,
    ResourceData,
    Schema,
    ValueType,
    data_source_schema_from_resource_schema,
    import_state_passthrough,
    validate_attributes,
)

__all__ = [
    "Provider",
    "ProviderContext",
    "Resource",
    "ResourceData",
    "Schema",
    "ValueType",
    "build_foreman_organization",
    "data_source_foreman_organization",
    "data_source_schema_from_resource_schema",
    "import_state_passthrough",
    "resource_foreman_organization",
    "set_resource_data_from_foreman_organization",
    "validate_attributes",
]
