"""Pydantic schemas for waste items: stored record, create payload, partial update patch."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ItemStatus = Literal["pending", "collected", "processing", "completed"]

# Ordered for error messages; status is the only vocabulary the server enforces.
ITEM_STATUSES: tuple[str, ...] = ("pending", "collected", "processing", "completed")

# Fields that must be present and truthy on create, in wire (camelCase) form.
REQUIRED_CREATE_FIELDS: tuple[str, ...] = (
    "type",
    "quantity",
    "unit",
    "location",
    "clientId",
    "clientName",
)

# Shared by all item schemas: camelCase on the wire, snake_case in Python.
_camel_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class WasteItem(BaseModel):
    """A single waste-collection record as held by the item store."""

    model_config = _camel_config

    id: str = Field(..., description="Opaque identifier assigned at creation.")
    type: str = Field(..., description="Waste type (e.g. General Waste, Recycling).")
    quantity: int = Field(..., gt=0, description="Amount, in the given unit.")
    unit: str = Field(..., description="Unit of measure (e.g. kg, tonnes).")
    location: str
    client_id: str
    client_name: str
    status: ItemStatus = "pending"
    collection_date: str | None = Field(
        default=None,
        description="Scheduled or actual collection date; free-form date string.",
    )
    created_at: datetime
    updated_at: datetime


class ItemCreate(BaseModel):
    """
    Payload for creating an item.

    Every field is optional at the schema level: presence and range checks live in
    the item store so that missing, null and falsy values (including 0) are all
    reported as missing required fields. Any status sent here is ignored.
    """

    model_config = _camel_config

    type: str | None = None
    quantity: int | None = None
    unit: str | None = None
    location: str | None = None
    client_id: str | None = None
    client_name: str | None = None
    collection_date: str | None = None


class ItemPatch(BaseModel):
    """
    Partial update for an item.

    Only fields present in the request body are considered (see model_fields_set);
    an absent field and an explicit null are distinguishable.
    """

    model_config = _camel_config

    type: str | None = None
    quantity: int | None = None
    unit: str | None = None
    location: str | None = None
    client_id: str | None = None
    client_name: str | None = None
    status: str | None = None
    collection_date: str | None = None


class ItemListResponse(BaseModel):
    """All items in insertion order plus their count."""

    items: list[WasteItem]
    total: int


class ItemDeleteResponse(BaseModel):
    """Confirmation message and the removed item."""

    message: str = "Item deleted successfully"
    item: WasteItem
