from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from itemvault.core.errors import InvalidTokenError, UnauthorizedError
from itemvault.db.records import is_valid_id

optional_security = HTTPBearer(auto_error=False)

def _normalize_password(password: str) -> str:
	# bcrypt only considers the first 72 bytes; truncate consistently to avoid errors.
	raw = password.encode("utf-8")
	if len(raw) <= 72:
		return password
	return raw[:72].decode("utf-8", errors="ignore")


class PasswordHasher:
	"""Salted one-way hashing (bcrypt through passlib)."""

	def __init__(self, rounds: int = 10):
		self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

	def hash(self, password: str) -> str:
		return self.pwd_context.hash(_normalize_password(password))

	def verify(self, password: str, password_hash: str) -> bool:
		try:
			return self.pwd_context.verify(_normalize_password(password), password_hash)
		except (ValueError, TypeError):
			# unrecognised or corrupted hash
			return False


class TokenSigner:
	"""Issues and checks signed bearer tokens carrying ``userId``."""

	def __init__(self, secret: str, algorithm: str = "HS256", expires_sec: int = 3600):
		self.secret = secret
		self.algorithm = algorithm
		self.expires_sec = expires_sec

	def sign(self, user_id: str, now: Optional[datetime] = None) -> str:
		now = now or datetime.now(timezone.utc)
		payload = {
			"userId": user_id,
			"iat": int(now.timestamp()),
			"exp": int((now + timedelta(seconds=self.expires_sec)).timestamp()),
		}
		return jwt.encode(payload, self.secret, algorithm=self.algorithm)

	def decode(self, token: str) -> dict:
		try:
			return jwt.decode(token, self.secret, algorithms=[self.algorithm])
		except JWTError:
			raise InvalidTokenError()

	def verify(self, token: str) -> str:
		"""Return the user id in ``token`` or raise ``InvalidTokenError``."""
		payload = self.decode(token)
		if "exp" not in payload:
			raise InvalidTokenError()
		user_id = payload.get("userId")
		if not is_valid_id(user_id):
			raise InvalidTokenError()
		return user_id


def get_current_user_id(
	request: Request,
	creds: HTTPAuthorizationCredentials | None = Depends(optional_security),
) -> str:
	if not creds:
		# HTTPBearer also yields None for a non-Bearer scheme
		if request.headers.get("Authorization"):
			raise InvalidTokenError()
		raise UnauthorizedError()

	signer: TokenSigner = request.app.state.token_signer
	return signer.verify(creds.credentials)
