from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from itemvault.core.errors import ConflictError
from itemvault.db.models import User, Item
from itemvault.db.records import ItemRecord, UserRecord, new_id, utcnow


def _user_record(row: User) -> UserRecord:
	return UserRecord(id=row.id, email=row.email, password_hash=row.password_hash, created_at=row.created_at)

def _item_record(row: Item) -> ItemRecord:
	return ItemRecord(
		id=row.id,
		owner_id=row.owner_id,
		name=row.name,
		price=row.price,
		created_at=row.created_at,
		updated_at=row.updated_at,
	)


class SqlStore:
	"""Store backed by a SQLAlchemy session, one commit per write."""

	def __init__(self, db: Session):
		self.db = db

	def find_user(self, email: str) -> Optional[UserRecord]:
		row = self.db.query(User).filter(User.email == email).first()
		return _user_record(row) if row else None

	def create_user(self, email: str, password_hash: str) -> UserRecord:
		row = User(id=new_id(), email=email, password_hash=password_hash, created_at=utcnow())
		self.db.add(row)
		try:
			self.db.commit()
		except IntegrityError:
			self.db.rollback()
			raise ConflictError()
		self.db.refresh(row)
		return _user_record(row)

	def find_item(self, item_id: str) -> Optional[ItemRecord]:
		row = self.db.query(Item).filter(Item.id == item_id).first()
		return _item_record(row) if row else None

	def list_items(self, owner_id: str) -> list[ItemRecord]:
		rows = (
			self.db.query(Item)
			.filter(Item.owner_id == owner_id)
			.order_by(Item.seq.asc())
			.all()
		)
		return [_item_record(row) for row in rows]

	def create_item(self, owner_id: str, name: str, price: float) -> ItemRecord:
		now = utcnow()
		row = Item(id=new_id(), owner_id=owner_id, name=name, price=price, created_at=now, updated_at=now)
		self.db.add(row)
		self.db.commit()
		self.db.refresh(row)
		return _item_record(row)

	def update_item(self, item_id: str, changes: dict) -> Optional[ItemRecord]:
		values = {k: v for k, v in changes.items() if k in ("name", "price")}
		values["updated_at"] = utcnow()
		updated = (
			self.db.query(Item)
			.filter(Item.id == item_id)
			.update(values, synchronize_session=False)
		)
		self.db.commit()
		if not updated:
			return None
		return self.find_item(item_id)

	def delete_item(self, item_id: str) -> bool:
		deleted = self.db.query(Item).filter(Item.id == item_id).delete(synchronize_session=False)
		self.db.commit()
		return bool(deleted)
