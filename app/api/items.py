"""Waste item CRUD endpoints. Every route requires a valid bearer token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.auth import get_current_user
from app.core.storage import get_item_store
from app.schemas.auth import CurrentUser
from app.schemas.items import (
    ItemCreate,
    ItemDeleteResponse,
    ItemListResponse,
    ItemPatch,
    WasteItem,
)
from app.services.item_store import ItemNotFoundError, ItemStore, ItemValidationError

logger = logging.getLogger(__name__)
router = APIRouter()


def _not_found(e: ItemNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


def _invalid(e: ItemValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.get("", response_model=ItemListResponse)
def list_items(
    store: Annotated[ItemStore, Depends(get_item_store)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ItemListResponse:
    """Return every item in insertion order with the total count. No paging or filtering."""
    items = store.list()
    return ItemListResponse(items=items, total=len(items))


@router.get("/{item_id}", response_model=WasteItem)
def get_item(
    item_id: str,
    store: Annotated[ItemStore, Depends(get_item_store)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> WasteItem:
    try:
        return store.get(item_id)
    except ItemNotFoundError as e:
        raise _not_found(e) from e


@router.post("", response_model=WasteItem, status_code=status.HTTP_201_CREATED)
def create_item(
    store: Annotated[ItemStore, Depends(get_item_store)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    body: ItemCreate | None = None,
) -> WasteItem:
    """
    Create an item. type, quantity, unit, location, clientId and clientName are required;
    status always starts as pending.
    """
    if body is None:
        body = ItemCreate()
    try:
        item = store.create(body)
    except ItemValidationError as e:
        raise _invalid(e) from e
    logger.info("Item created", extra={"item_id": item.id, "actor": user.username})
    return item


@router.put("/{item_id}", response_model=WasteItem)
def update_item(
    item_id: str,
    store: Annotated[ItemStore, Depends(get_item_store)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
    body: ItemPatch | None = None,
) -> WasteItem:
    """
    Partially update an item: only fields present in the body change.
    Returns 404 for an unknown id, 400 for a non-positive quantity or unknown status.
    """
    if body is None:
        body = ItemPatch()
    try:
        item = store.update(item_id, body)
    except ItemNotFoundError as e:
        raise _not_found(e) from e
    except ItemValidationError as e:
        raise _invalid(e) from e
    logger.info(
        "Item updated",
        extra={"item_id": item_id, "actor": user.username, "fields": sorted(body.model_fields_set)},
    )
    return item


@router.delete("/{item_id}", response_model=ItemDeleteResponse)
def delete_item(
    item_id: str,
    store: Annotated[ItemStore, Depends(get_item_store)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ItemDeleteResponse:
    try:
        item = store.delete(item_id)
    except ItemNotFoundError as e:
        raise _not_found(e) from e
    logger.info("Item deleted", extra={"item_id": item_id, "actor": user.username})
    return ItemDeleteResponse(item=item)
