import os
from dotenv import load_dotenv

load_dotenv()

def _split_origins(raw: str) -> list[str]:
	return [origin.strip() for origin in raw.split(",") if origin.strip()]

class Settings:
	def __init__(self, **overrides):
		self.APP_NAME = os.getenv("APP_NAME", "Item Vault API")
		self.APP_ENV = os.getenv("APP_ENV", "development").lower()
		self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./itemvault.db")

		self.JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
		self.JWT_ALG = os.getenv("JWT_ALG", "HS256")
		self.ACCESS_TOKEN_EXPIRES_SEC = int(os.getenv("ACCESS_TOKEN_EXPIRES_SEC", "3600"))

		# bcrypt cost below 10 is not accepted
		self.BCRYPT_ROUNDS = max(10, int(os.getenv("BCRYPT_ROUNDS", "10")))

		self.ALLOW_ORIGINS = _split_origins(os.getenv("ALLOW_ORIGINS", "*"))

		self.HOST = os.getenv("HOST", "0.0.0.0")
		self.PORT = int(os.getenv("PORT", "8000"))

		for key, value in overrides.items():
			if not hasattr(self, key):
				raise AttributeError(f"Unknown setting: {key}")
			setattr(self, key, value)
		self.BCRYPT_ROUNDS = max(10, int(self.BCRYPT_ROUNDS))

	@property
	def is_test(self) -> bool:
		return self.APP_ENV == "test"

settings = Settings()
