"""Item store: ordered in-memory collection of waste items with validated create/update/delete."""

import logging
import threading
import uuid
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from app.schemas.items import (
    ITEM_STATUSES,
    REQUIRED_CREATE_FIELDS,
    ItemCreate,
    ItemPatch,
    WasteItem,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: " + ", ".join(REQUIRED_CREATE_FIELDS)
INVALID_QUANTITY_MESSAGE = "Quantity must be greater than 0"
INVALID_STATUS_MESSAGE = "Invalid status. Must be one of: " + ", ".join(ITEM_STATUSES)

# Patch fields that overwrite only when truthy; collection_date overwrites whenever present.
_TRUTHY_PATCH_FIELDS = ("type", "quantity", "unit", "location", "client_id", "client_name", "status")


class ItemValidationError(Exception):
    """Raised when a create or update payload fails presence/range checks. Nothing is mutated."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ItemNotFoundError(Exception):
    """Raised when no item has the requested id."""

    def __init__(self, item_id: str, message: str = "Item not found") -> None:
        self.item_id = item_id
        self.message = message
        super().__init__(message)


class ItemStore(Protocol):
    """Storage interface used by the API layer; swap for a persistent backend without touching handlers."""

    def list(self) -> list[WasteItem]: ...

    def get(self, item_id: str) -> WasteItem: ...

    def create(self, data: ItemCreate) -> WasteItem: ...

    def update(self, item_id: str, patch: ItemPatch) -> WasteItem: ...

    def delete(self, item_id: str) -> WasteItem: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _validate_create(data: ItemCreate) -> None:
    # Falsy check on purpose: quantity 0 and empty strings count as missing.
    values = (data.type, data.quantity, data.unit, data.location, data.client_id, data.client_name)
    if not all(values):
        raise ItemValidationError(MISSING_FIELDS_MESSAGE)
    if data.quantity <= 0:
        raise ItemValidationError(INVALID_QUANTITY_MESSAGE)


def _validate_patch(patch: ItemPatch) -> None:
    present = patch.model_fields_set
    if "quantity" in present and (patch.quantity is None or patch.quantity <= 0):
        raise ItemValidationError(INVALID_QUANTITY_MESSAGE)
    if "status" in present and patch.status and patch.status not in ITEM_STATUSES:
        raise ItemValidationError(INVALID_STATUS_MESSAGE)


def _patch_changes(patch: ItemPatch) -> dict[str, Any]:
    """Field-by-field changes a validated patch applies to an existing item."""
    present = patch.model_fields_set
    changes: dict[str, Any] = {}
    for field in _TRUTHY_PATCH_FIELDS:
        value = getattr(patch, field)
        if field in present and value:
            changes[field] = value
    if "collection_date" in present:
        changes["collection_date"] = patch.collection_date
    return changes


class InMemoryItemStore:
    """
    Ordered list of WasteItem records guarded by a lock.

    Handlers may run concurrently in FastAPI's thread pool, so every read-modify-write
    happens under the lock. Items are replaced, never mutated in place: a record
    handed to a caller does not change afterwards.
    """

    def __init__(self, items: Iterable[WasteItem] = (), clock=_utcnow) -> None:
        self._items: list[WasteItem] = list(items)
        self._lock = threading.Lock()
        self._clock = clock

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    def _next_timestamp(self, previous: datetime | None = None) -> datetime:
        """Current time, nudged forward so updated_at strictly increases on coarse clocks."""
        now = self._clock()
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    def list(self) -> list[WasteItem]:
        with self._lock:
            return list(self._items)

    def get(self, item_id: str) -> WasteItem:
        with self._lock:
            return self._items[self._index_of(item_id)]

    def create(self, data: ItemCreate) -> WasteItem:
        _validate_create(data)
        now = self._next_timestamp()
        item = WasteItem(
            id=str(uuid.uuid4()),
            type=data.type,
            quantity=data.quantity,
            unit=data.unit,
            location=data.location,
            client_id=data.client_id,
            client_name=data.client_name,
            status="pending",
            collection_date=data.collection_date or None,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._items.append(item)
        logger.debug("Item created: id=%s", item.id)
        return item

    def update(self, item_id: str, patch: ItemPatch) -> WasteItem:
        with self._lock:
            index = self._index_of(item_id)
            _validate_patch(patch)
            current = self._items[index]
            changes = _patch_changes(patch)
            changes["updated_at"] = self._next_timestamp(current.updated_at)
            updated = current.model_copy(update=changes)
            self._items[index] = updated
        logger.debug("Item updated: id=%s fields=%s", item_id, sorted(changes))
        return updated

    def delete(self, item_id: str) -> WasteItem:
        with self._lock:
            index = self._index_of(item_id)
            removed = self._items.pop(index)
        logger.debug("Item deleted: id=%s", item_id)
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def sample_items(now: datetime | None = None) -> list[WasteItem]:
    """The two demo records the dashboard starts with."""
    stamp = now or _utcnow()
    return [
        WasteItem(
            id="1",
            type="General Waste",
            quantity=500,
            unit="kg",
            location="Manchester Office",
            client_id="CLIENT-001",
            client_name="TechCorp Ltd",
            status="collected",
            collection_date="2024-01-15",
            created_at=stamp,
            updated_at=stamp,
        ),
        WasteItem(
            id="2",
            type="Recycling",
            quantity=250,
            unit="kg",
            location="Birmingham Warehouse",
            client_id="CLIENT-002",
            client_name="GreenBuild Solutions",
            status="pending",
            collection_date="2024-01-20",
            created_at=stamp,
            updated_at=stamp,
        ),
    ]
