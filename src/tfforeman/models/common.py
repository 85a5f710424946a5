from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class ForemanModel(BaseModel):
    """Base model with permissive extra handling for upstream compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ForemanObject(ForemanModel):
    """Attributes shared by every Foreman API object."""

    read_only_fields: ClassVar[frozenset[str]] = frozenset({"created_at", "updated_at"})

    id: int = 0
    name: str = ""
    created_at: str | None = None
    updated_at: str | None = None

    def to_payload(self, *, include_id: bool = True) -> dict[str, Any]:
        """Return the JSON body sent to Foreman for this object.

        Only declared, writable fields are included; attributes the server
        returned beyond the model (counts, nested links) are never echoed back.
        """

        fields = set(type(self).model_fields) - self.read_only_fields
        if not include_id:
            fields.discard("id")
        return self.model_dump(mode="json", include=fields)


ResultT = TypeVar("ResultT")


class QueryResponse(ForemanModel, Generic[ResultT]):
    """Search envelope returned by Foreman index endpoints."""

    total: int = 0
    subtotal: int = 0
    page: int | None = None
    per_page: int | None = None
    search: str | None = None
    results: list[ResultT] = Field(default_factory=list)
