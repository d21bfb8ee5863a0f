from itemvault.core.errors import AuthError, ConflictError, ValidationError
from itemvault.core.security import PasswordHasher, TokenSigner
from itemvault.db.records import UserRecord, is_clean_text
from itemvault.db.store import Store


class AuthService:
	def __init__(self, store: Store, hasher: PasswordHasher, signer: TokenSigner):
		self.store = store
		self.hasher = hasher
		self.signer = signer

	@staticmethod
	def _require_credentials(email, password) -> None:
		if not email or not password:
			raise ValidationError("Email and password are required")
		if not is_clean_text(email) or not is_clean_text(password):
			raise ValidationError("Email and password must be valid text")

	def register(self, email: str, password: str) -> UserRecord:
		self._require_credentials(email, password)
		if self.store.find_user(email):
			raise ConflictError()
		return self.store.create_user(email, self.hasher.hash(password))

	def login(self, email: str, password: str) -> str:
		self._require_credentials(email, password)
		user = self.store.find_user(email)
		# Unknown email and wrong password must stay indistinguishable
		if not user or not self.hasher.verify(password, user.password_hash):
			raise AuthError()
		return self.signer.sign(user.id)
