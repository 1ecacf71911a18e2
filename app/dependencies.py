"""Shared dependencies: DB session, session verification, current user, ownership checks."""
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.config import get_settings
from app.database import get_db
from app.errors import AuthError, AuthFailure, NotFoundError
from app.models.user import User
from app.services import users
from app.services.auth import Authenticator, SessionClaims

security = HTTPBearer(auto_error=False)


@lru_cache
def get_authenticator() -> Authenticator:
    settings = get_settings()
    return Authenticator(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(days=settings.jwt_expire_days),
    )


def get_session_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """Session cookie first; a Bearer header is accepted for non-browser clients."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if not token and credentials:
        token = credentials.credentials
    return token


def get_session_claims(
    token: str | None = Depends(get_session_token),
    authenticator: Authenticator = Depends(get_authenticator),
) -> SessionClaims:
    return authenticator.verify(token)


def get_current_user(
    db: Session = Depends(get_db),
    claims: SessionClaims = Depends(get_session_claims),
) -> User:
    try:
        return users.get_by_id(db, claims.user_id)
    except NotFoundError:
        raise AuthError(AuthFailure.invalid, "User not found")
