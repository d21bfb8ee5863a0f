import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from itemvault.core.config import Settings
from itemvault.core.security import PasswordHasher, TokenSigner
from itemvault.db.memory import MemoryStore
from itemvault.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings():
	return Settings(APP_ENV="test", JWT_SECRET=TEST_SECRET, BCRYPT_ROUNDS=10)

@pytest.fixture
def app(settings):
	return create_app(settings)

@pytest.fixture
def client(app):
	with TestClient(app) as c:
		yield c

@pytest.fixture
def hasher():
	return PasswordHasher(rounds=10)

@pytest.fixture
def signer():
	return TokenSigner(TEST_SECRET, expires_sec=3600)

@pytest.fixture
def memory_store():
	return MemoryStore()

def register_and_login(client, email="test@user.com", password="password123") -> str:
	res = client.post("/api/auth/register", json={"email": email, "password": password})
	assert res.status_code == 201, res.text
	res = client.post("/api/auth/login", json={"email": email, "password": password})
	assert res.status_code == 200, res.text
	return res.json()["token"]

def bearer(token: str) -> dict:
	return {"Authorization": f"Bearer {token}"}
