from threading import Lock
from typing import Optional

from itemvault.core.errors import ConflictError
from itemvault.db.records import ItemRecord, UserRecord, new_id


class MemoryStore:
	"""Process-local store; contents vanish with the instance."""

	def __init__(self):
		self._lock = Lock()
		self._users: dict[str, UserRecord] = {}  # email -> user
		self._items: dict[str, ItemRecord] = {}  # id -> item, insertion ordered

	def find_user(self, email: str) -> Optional[UserRecord]:
		return self._users.get(email)

	def create_user(self, email: str, password_hash: str) -> UserRecord:
		with self._lock:
			if email in self._users:
				raise ConflictError()
			user = UserRecord(id=new_id(), email=email, password_hash=password_hash)
			self._users[email] = user
			return user

	def find_item(self, item_id: str) -> Optional[ItemRecord]:
		return self._items.get(item_id)

	def list_items(self, owner_id: str) -> list[ItemRecord]:
		return [item for item in list(self._items.values()) if item.owner_id == owner_id]

	def create_item(self, owner_id: str, name: str, price: float) -> ItemRecord:
		item = ItemRecord(id=new_id(), owner_id=owner_id, name=name, price=price)
		with self._lock:
			self._items[item.id] = item
		return item

	def update_item(self, item_id: str, changes: dict) -> Optional[ItemRecord]:
		with self._lock:
			current = self._items.get(item_id)
			if current is None:
				return None
			updated = current.merged(changes)
			self._items[item_id] = updated
			return updated

	def delete_item(self, item_id: str) -> bool:
		with self._lock:
			return self._items.pop(item_id, None) is not None

	def clear(self) -> None:
		with self._lock:
			self._users.clear()
			self._items.clear()
