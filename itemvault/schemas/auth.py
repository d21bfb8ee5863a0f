from typing import Optional

from pydantic import BaseModel

# Presence is checked by AuthService so missing fields answer 400, not 422
class RegisterRequest(BaseModel):
	email: Optional[str] = None
	password: Optional[str] = None

class LoginRequest(BaseModel):
	email: Optional[str] = None
	password: Optional[str] = None

class TokenResponse(BaseModel):
	token: str

class MessageResponse(BaseModel):
	message: str
