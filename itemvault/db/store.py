"""Store interface the services are written against.

Two implementations ship with the package: :class:`~itemvault.db.sql_store.SqlStore`
(SQLAlchemy) and :class:`~itemvault.db.memory.MemoryStore` (process-local dicts,
used as the fake store in the service tests).
Every write touches exactly one record.
"""
from typing import Optional, Protocol

from itemvault.db.records import ItemRecord, UserRecord


class Store(Protocol):
	def find_user(self, email: str) -> Optional[UserRecord]:
		...

	def create_user(self, email: str, password_hash: str) -> UserRecord:
		"""Persist a user; raises ``ConflictError`` when the email is taken."""
		...

	def find_item(self, item_id: str) -> Optional[ItemRecord]:
		...

	def list_items(self, owner_id: str) -> list[ItemRecord]:
		...

	def create_item(self, owner_id: str, name: str, price: float) -> ItemRecord:
		...

	def update_item(self, item_id: str, changes: dict) -> Optional[ItemRecord]:
		"""Apply ``name``/``price`` changes; returns ``None`` if the item vanished."""
		...

	def delete_item(self, item_id: str) -> bool:
		...
