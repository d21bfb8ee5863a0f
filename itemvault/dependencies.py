from typing import Iterator

from fastapi import Depends, Request

from itemvault.db.sql_store import SqlStore
from itemvault.db.store import Store
from itemvault.services.auth_service import AuthService
from itemvault.services.item_service import ItemService


def get_store(request: Request) -> Iterator[Store]:
	db = request.app.state.session_factory()
	try:
		yield SqlStore(db)
	finally:
		db.close()

def get_auth_service(request: Request, store: Store = Depends(get_store)) -> AuthService:
	return AuthService(store, request.app.state.password_hasher, request.app.state.token_signer)

def get_item_service(store: Store = Depends(get_store)) -> ItemService:
	return ItemService(store)
