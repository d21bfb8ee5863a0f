from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class ItemCreate(BaseModel):
	name: Optional[Any] = None
	price: Optional[Any] = None

class ItemOut(BaseModel):
	id: str
	owner_id: str
	name: str
	price: float
	created_at: datetime
	updated_at: datetime

	class Config:
		from_attributes = True
		alias_generator = to_camel
		populate_by_name = True
