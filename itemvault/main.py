import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from itemvault.core.config import Settings, settings as default_settings
from itemvault.core.errors import error_guard_middleware, register_exception_handlers
from itemvault.core.logging import log_event, request_id_middleware
from itemvault.core.security import PasswordHasher, TokenSigner
from itemvault.db.session import build_engine, build_session_factory, init_db
from itemvault.routers.auth import router as auth_router
from itemvault.routers.items import router as items_router


def _connect_store(app: FastAPI) -> None:
	engine = app.state.engine
	try:
		init_db(engine)
	except SQLAlchemyError as exc:
		log_event("db_connect_failed", level=logging.ERROR, error=str(exc))
		sys.exit(1)
	log_event("db_connected", url=engine.url.render_as_string(hide_password=True))

@asynccontextmanager
async def lifespan(app: FastAPI):
	_connect_store(app)
	yield
	app.state.engine.dispose()

def create_app(settings: Optional[Settings] = None) -> FastAPI:
	settings = settings or default_settings
	app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

	app.state.settings = settings
	app.state.engine = build_engine(settings)
	app.state.session_factory = build_session_factory(app.state.engine)
	app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
	app.state.token_signer = TokenSigner(
		settings.JWT_SECRET,
		algorithm=settings.JWT_ALG,
		expires_sec=settings.ACCESS_TOKEN_EXPIRES_SEC,
	)

	if settings.is_test:
		# Ephemeral store; tables must exist before any request
		init_db(app.state.engine)

	# Middleware
	app.middleware("http")(error_guard_middleware)
	app.middleware("http")(request_id_middleware)
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.ALLOW_ORIGINS,
		allow_credentials=True,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	register_exception_handlers(app)

	# Routers
	app.include_router(auth_router)
	app.include_router(items_router)

	@app.get("/health")
	def health():
		return {"status": "OK"}

	return app

def run() -> None:
	import uvicorn

	uvicorn.run("itemvault.main:app", host=default_settings.HOST, port=default_settings.PORT)

app = create_app()

if __name__ == "__main__":
	run()
