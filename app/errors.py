"""Error taxonomy and the FastAPI handlers that turn it into HTTP responses."""
import enum
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError, TimeoutError as PoolTimeoutError

log = logging.getLogger("uvicorn.error")


class AppError(Exception):
    status_code = 500
    detail = "Internal Server Error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = 422
    detail = "Invalid request"


class NotFoundError(AppError):
    status_code = 404
    detail = "Not found"


class DuplicateEmailError(AppError):
    status_code = 422
    detail = "Email already exists"


class BadPasswordError(AppError):
    status_code = 422
    detail = "Invalid password"


class AuthFailure(str, enum.Enum):
    missing = "missing"
    invalid = "invalid"
    expired = "expired"
    forbidden = "forbidden"


_AUTH_DETAILS = {
    AuthFailure.missing: "Not authenticated",
    AuthFailure.invalid: "Invalid token",
    AuthFailure.expired: "Session expired",
    AuthFailure.forbidden: "Not found",
}


class AuthError(AppError):
    """401 for missing/invalid/expired sessions. Forbidden is reported as 404
    so callers cannot tell someone else's resource from a missing one."""

    def __init__(self, reason: AuthFailure, detail: str | None = None):
        self.reason = reason
        self.status_code = 404 if reason == AuthFailure.forbidden else 401
        super().__init__(detail or _AUTH_DETAILS[reason])


def ensure_owned_by(owner_id: int | None, caller_id: int, what: str = "Resource") -> None:
    """Missing and not-yours look the same to the caller."""
    if owner_id is None or owner_id != caller_id:
        raise AuthError(AuthFailure.forbidden, f"{what} not found")


class StorageError(AppError):
    status_code = 500
    detail = "Storage error"


class UploadError(StorageError):
    detail = "Error uploading files"

    def __init__(self, detail: str | None = None, uploaded: list[str] | None = None):
        self.uploaded = list(uploaded or [])
        super().__init__(detail)


def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    content = {"detail": exc.detail}
    if isinstance(exc, UploadError):
        content["uploaded"] = exc.uploaded
    return JSONResponse(status_code=exc.status_code, content=content)


def _db_unavailable_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    log.error("%s %s: database unavailable", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "Service temporarily unavailable, please retry"},
        headers={"Retry-After": "5"},
    )


def _db_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    log.error("%s %s: database error", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(OperationalError, _db_unavailable_handler)
    app.add_exception_handler(PoolTimeoutError, _db_unavailable_handler)
    app.add_exception_handler(SQLAlchemyError, _db_error_handler)
