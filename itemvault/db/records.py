import re
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")

def new_id() -> str:
	return uuid.uuid4().hex

def is_valid_id(value) -> bool:
	return isinstance(value, str) and bool(_ID_PATTERN.match(value))

def is_clean_text(value) -> bool:
	"""True for strings that encode as UTF-8 (no lone surrogates)."""
	if not isinstance(value, str):
		return False
	try:
		value.encode("utf-8")
	except UnicodeEncodeError:
		return False
	return True

def utcnow() -> datetime:
	# Stored naive, always UTC
	return datetime.now(timezone.utc).replace(tzinfo=None)

@dataclass(frozen=True)
class UserRecord:
	id: str
	email: str
	password_hash: str
	created_at: datetime = field(default_factory=utcnow)

@dataclass(frozen=True)
class ItemRecord:
	id: str
	owner_id: str
	name: str
	price: float
	created_at: datetime = field(default_factory=utcnow)
	updated_at: datetime = field(default_factory=utcnow)

	def merged(self, changes: dict) -> "ItemRecord":
		"""Copy with ``changes`` applied; ``id`` and ``owner_id`` never move."""
		allowed = {k: v for k, v in changes.items() if k in ("name", "price")}
		return replace(self, **allowed, updated_at=utcnow())
