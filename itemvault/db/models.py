from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import declarative_base, relationship

from itemvault.db.records import new_id, utcnow

Base = declarative_base()

class User(Base):
	__tablename__ = "users"

	id = Column(String(32), primary_key=True, default=new_id)
	email = Column(String, unique=True, index=True, nullable=False)
	password_hash = Column(String, nullable=False)
	created_at = Column(DateTime, default=utcnow)

	items = relationship("Item", back_populates="owner")

class Item(Base):
	__tablename__ = "items"

	# insertion order for listings
	seq = Column(Integer, primary_key=True, autoincrement=True)
	id = Column(String(32), unique=True, index=True, nullable=False, default=new_id)
	owner_id = Column(String(32), ForeignKey("users.id"), index=True, nullable=False)
	name = Column(String, nullable=False)
	price = Column(Float, nullable=False)
	created_at = Column(DateTime, default=utcnow)
	updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

	owner = relationship("User", back_populates="items")
