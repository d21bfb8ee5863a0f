from fastapi import APIRouter, Depends, Request, status

from itemvault.core.errors import AuthError
from itemvault.core.logging import log_event, request_id_of
from itemvault.dependencies import get_auth_service
from itemvault.schemas.auth import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from itemvault.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(request: Request, payload: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
	user = auth.register(payload.email, payload.password)
	log_event("user_registered", user_id=user.id, request_id=request_id_of(request))
	return {"message": "User registered successfully"}

@router.post("/login", response_model=TokenResponse)
def login(request: Request, payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
	try:
		token = auth.login(payload.email, payload.password)
	except AuthError:
		log_event("login_failed", request_id=request_id_of(request))
		raise

	log_event("user_login", request_id=request_id_of(request))
	return {"token": token}
