from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from itemvault.core.config import Settings
from itemvault.db.models import Base


def build_engine(settings: Settings) -> Engine:
	if settings.is_test:
		# One shared connection keeps the in-memory database alive across sessions
		return create_engine(
			"sqlite://",
			connect_args={"check_same_thread": False},
			poolclass=StaticPool,
		)
	connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
	return create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

def build_session_factory(engine: Engine) -> sessionmaker:
	return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(engine: Engine) -> None:
	"""Check the connection and create missing tables."""
	with engine.connect() as conn:
		conn.execute(text("SELECT 1"))
	Base.metadata.create_all(bind=engine)
