import math
from numbers import Real

from itemvault.core.errors import NotFoundError, ValidationError
from itemvault.db.records import ItemRecord, is_clean_text, is_valid_id
from itemvault.db.store import Store

_MISSING = object()


def coerce_price(value) -> float:
	"""Turn a number or numeric string into a finite float."""
	if value is None or isinstance(value, bool):
		raise ValidationError("Price must be a number")
	if isinstance(value, str):
		value = value.strip()
	elif not isinstance(value, Real):
		raise ValidationError("Price must be a number")
	try:
		price = float(value)
	except (OverflowError, ValueError):
		# huge JSON integers overflow a float
		raise ValidationError("Price must be a number")
	if not math.isfinite(price):
		raise ValidationError("Price must be a number")
	return price

def _clean_name(value) -> str:
	if not value or not is_clean_text(value):
		raise ValidationError("Name must be a non-empty string")
	return value


class ItemService:
	"""Item CRUD where every read and write is scoped to the caller."""

	def __init__(self, store: Store):
		self.store = store

	def _owned_item(self, owner_id: str, item_id: str) -> ItemRecord:
		# Missing and foreign items look the same to the caller
		if not is_valid_id(item_id):
			raise NotFoundError()
		item = self.store.find_item(item_id)
		if item is None or item.owner_id != owner_id:
			raise NotFoundError()
		return item

	def create(self, owner_id: str, name, price) -> ItemRecord:
		if not name or price is None:
			raise ValidationError("Name and price are required")
		return self.store.create_item(owner_id, _clean_name(name), coerce_price(price))

	def list(self, owner_id: str) -> list[ItemRecord]:
		return self.store.list_items(owner_id)

	def get(self, owner_id: str, item_id: str) -> ItemRecord:
		return self._owned_item(owner_id, item_id)

	def update(self, owner_id: str, item_id: str, patch: dict) -> ItemRecord:
		item = self._owned_item(owner_id, item_id)

		changes = {}
		name = patch.get("name", _MISSING)
		if name is not _MISSING:
			changes["name"] = _clean_name(name)
		price = patch.get("price", _MISSING)
		if price is not _MISSING:
			changes["price"] = coerce_price(price)
		if not changes:
			return item

		updated = self.store.update_item(item.id, changes)
		if updated is None:
			# deleted between lookup and write
			raise NotFoundError()
		return updated

	def delete(self, owner_id: str, item_id: str) -> None:
		item = self._owned_item(owner_id, item_id)
		if not self.store.delete_item(item.id):
			raise NotFoundError()
