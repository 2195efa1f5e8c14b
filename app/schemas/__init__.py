"""Pydantic request/response schemas."""

from app.schemas.auth import CurrentUser, LoginRequest, LoginResponse, PublicUser
from app.schemas.health import HealthResponse
from app.schemas.items import (
    ITEM_STATUSES,
    ItemCreate,
    ItemDeleteResponse,
    ItemListResponse,
    ItemPatch,
    ItemStatus,
    WasteItem,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "ITEM_STATUSES",
    "ItemCreate",
    "ItemDeleteResponse",
    "ItemListResponse",
    "ItemPatch",
    "ItemStatus",
    "LoginRequest",
    "LoginResponse",
    "PublicUser",
    "WasteItem",
]
