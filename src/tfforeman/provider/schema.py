"""Schema and resource-data primitives for provider resources and data sources."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from tfforeman.errors import ConfigError

if TYPE_CHECKING:
    from tfforeman.provider.context import ProviderContext


class ValueType(str, Enum):
    STRING = "string"
    INT = "int"
    BOOL = "bool"
    FLOAT = "float"


_ZERO_VALUES: dict[ValueType, Any] = {
    ValueType.STRING: "",
    ValueType.INT: 0,
    ValueType.BOOL: False,
    ValueType.FLOAT: 0.0,
}

_PYTHON_TYPES: dict[ValueType, tuple[type, ...]] = {
    ValueType.STRING: (str,),
    ValueType.INT: (int,),
    ValueType.BOOL: (bool,),
    ValueType.FLOAT: (int, float),
}


@dataclass(frozen=True)
class Schema:
    """Metadata for one attribute of a resource or data source."""

    type: ValueType
    required: bool = False
    optional: bool = False
    computed: bool = False
    description: str = ""

    def zero_value(self) -> Any:
        return _ZERO_VALUES[self.type]

    def accepts(self, value: Any) -> bool:
        if value is None:
            return True
        if self.type is not ValueType.BOOL and isinstance(value, bool):
            return False
        return isinstance(value, _PYTHON_TYPES[self.type])


SchemaMap = dict[str, Schema]


def validate_attributes(schema: Mapping[str, Schema], attributes: Mapping[str, Any]) -> None:
    """Check user-supplied attributes against a schema.

    Raises ConfigError for unknown keys, missing required attributes, values set
    on computed-only attributes and values of the wrong type.
    """

    unknown = sorted(set(attributes) - set(schema))
    if unknown:
        raise ConfigError(f"unsupported attributes: {', '.join(unknown)}")

    for key, field_schema in schema.items():
        value = attributes.get(key)
        if field_schema.required and value is None:
            raise ConfigError(f"attribute {key!r} is required")
        if value is not None and field_schema.computed and not (field_schema.required or field_schema.optional):
            raise ConfigError(f"attribute {key!r} is computed and cannot be set")
        if not field_schema.accepts(value):
            raise ConfigError(f"attribute {key!r} expects {field_schema.type.value}")


class ResourceData:
    """Attribute container passed to lifecycle callbacks.

    An empty id means the object does not exist (yet, or any more).
    """

    def __init__(self, schema: Mapping[str, Schema], attributes: Mapping[str, Any] | None = None, id: str = "") -> None:
        self._schema = dict(schema)
        self._id = id
        self._attributes: dict[str, Any] = {}
        for key, value in (attributes or {}).items():
            self.set(key, value)

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value

    def _field(self, key: str) -> Schema:
        try:
            return self._schema[key]
        except KeyError:
            raise KeyError(f"unknown attribute: {key}") from None

    def get(self, key: str) -> Any:
        """Return the attribute value, or the zero value of its type when unset."""

        value = self._attributes.get(key)
        if value is None:
            return self._field(key).zero_value()
        return value

    def set(self, key: str, value: Any) -> None:
        field_schema = self._field(key)
        if not field_schema.accepts(value):
            raise TypeError(
                f"attribute {key!r} expects {field_schema.type.value}, got {type(value).__name__}"
            )
        self._attributes[key] = value

    def state(self) -> dict[str, Any]:
        return {"id": self._id, **{key: self.get(key) for key in self._schema}}


Callback = Callable[[ResourceData, "ProviderContext"], None]
Importer = Callable[[ResourceData, "ProviderContext"], list[ResourceData]]


@dataclass
class Resource:
    """A schema plus the lifecycle callbacks bound to it."""

    schema: SchemaMap = field(default_factory=dict)
    create: Callback | None = None
    read: Callback | None = None
    update: Callback | None = None
    delete: Callback | None = None
    importer: Importer | None = None

    def data(self, attributes: Mapping[str, Any] | None = None, id: str = "") -> ResourceData:
        return ResourceData(self.schema, attributes, id=id)

    def validate(self, attributes: Mapping[str, Any]) -> None:
        validate_attributes(self.schema, attributes)


def data_source_schema_from_resource_schema(schema: Mapping[str, Schema]) -> SchemaMap:
    """Copy a resource schema for use by a data source: every attribute becomes computed."""

    return {
        key: replace(value, required=False, optional=False, computed=True)
        for key, value in schema.items()
    }


def import_state_passthrough(d: ResourceData, ctx: ProviderContext) -> list[ResourceData]:
    """Import using the supplied id as-is; the subsequent read fills in attributes."""

    return [d]
