from __future__ import annotations

from tfforeman.errors import ResourceIdError
from tfforeman.models.common import ForemanObject
from tfforeman.provider.schema import ResourceData


def parse_id(value: str) -> int:
    """Convert a resource id to the numeric Foreman id; an empty id maps to 0."""

    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        raise ResourceIdError(f"resource id must be numeric, got {value!r}") from None


def build_foreman_object(d: ResourceData) -> ForemanObject:
    """Build the shared base attributes from resource data.

    Missing attributes keep their zero values.
    """

    return ForemanObject(id=parse_id(d.id), name=d.get("name"))
