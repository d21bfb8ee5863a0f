from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request, status

from itemvault.core.logging import log_event, request_id_of
from itemvault.core.security import get_current_user_id
from itemvault.dependencies import get_item_service
from itemvault.schemas.auth import MessageResponse
from itemvault.schemas.items import ItemCreate, ItemOut
from itemvault.services.item_service import ItemService

router = APIRouter(prefix="/api/items", tags=["items"])

@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
def create_item(
	request: Request,
	payload: ItemCreate,
	user_id: str = Depends(get_current_user_id),
	items: ItemService = Depends(get_item_service),
):
	item = items.create(user_id, payload.name, payload.price)
	log_event("item_created", item_id=item.id, owner_id=user_id, request_id=request_id_of(request))
	return item

@router.get("", response_model=list[ItemOut])
def list_items(
	user_id: str = Depends(get_current_user_id),
	items: ItemService = Depends(get_item_service),
):
	return items.list(user_id)

@router.get("/{item_id}", response_model=ItemOut)
def get_item(
	item_id: str,
	user_id: str = Depends(get_current_user_id),
	items: ItemService = Depends(get_item_service),
):
	return items.get(user_id, item_id)

@router.put("/{item_id}", response_model=ItemOut)
def update_item(
	request: Request,
	item_id: str,
	patch: Optional[dict[str, Any]] = Body(default=None),
	user_id: str = Depends(get_current_user_id),
	items: ItemService = Depends(get_item_service),
):
	item = items.update(user_id, item_id, patch or {})
	log_event("item_updated", item_id=item.id, owner_id=user_id, request_id=request_id_of(request))
	return item

@router.delete("/{item_id}", response_model=MessageResponse)
def delete_item(
	request: Request,
	item_id: str,
	user_id: str = Depends(get_current_user_id),
	items: ItemService = Depends(get_item_service),
):
	items.delete(user_id, item_id)
	log_event("item_deleted", item_id=item_id, owner_id=user_id, request_id=request_id_of(request))
	return {"message": "Item deleted"}
