import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status

from itemvault.core.logging import log_event, request_id_of


class AppError(Exception):
	"""Base for every error that maps onto an HTTP response."""

	status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
	message = "Internal server error"

	def __init__(self, message: str | None = None, details=None):
		super().__init__(message or self.message)
		self.message = message or self.message
		self.details = details


class ValidationError(AppError):
	status_code = status.HTTP_400_BAD_REQUEST
	message = "Validation error"


class ConflictError(AppError):
	status_code = status.HTTP_400_BAD_REQUEST
	message = "User already exists"


class AuthError(AppError):
	status_code = status.HTTP_401_UNAUTHORIZED
	message = "Invalid credentials"


class UnauthorizedError(AppError):
	status_code = status.HTTP_401_UNAUTHORIZED
	message = "Unauthorized"


class InvalidTokenError(AppError):
	status_code = status.HTTP_401_UNAUTHORIZED
	message = "Invalid token"


class NotFoundError(AppError):
	status_code = status.HTTP_404_NOT_FOUND
	message = "Item not found"


class InternalError(AppError):
	pass


def error_response(request: Request, status_code: int, message: str, details=None):
	# Ensure details is serializable
	if isinstance(details, Exception):
		details = str(details)
	return JSONResponse(
		status_code=status_code,
		content={
			"error": {
				"message": message,
				"details": details,
				"request_id": request_id_of(request),
			}
		},
	)

async def app_error_handler(request: Request, exc: AppError):
	return error_response(request, exc.status_code, exc.message, details=exc.details)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
	return error_response(
		request,
		status.HTTP_400_BAD_REQUEST,
		"Validation error",
		details=[{"loc": list(err.get("loc", ())), "msg": err.get("msg")} for err in exc.errors()],
	)

async def error_guard_middleware(request: Request, call_next):
	# Anything that escapes the route handlers is logged and turned into a bare 500.
	try:
		return await call_next(request)
	except Exception as exc:
		log_event(
			"request_failed",
			level=logging.ERROR,
			exc_info=exc,
			method=request.method,
			path=request.url.path,
			error=type(exc).__name__,
			request_id=request_id_of(request),
		)
		return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.message)

def register_exception_handlers(app) -> None:
	app.add_exception_handler(AppError, app_error_handler)
	app.add_exception_handler(RequestValidationError, validation_exception_handler)
