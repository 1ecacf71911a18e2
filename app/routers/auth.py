"""Registration, login/logout and the caller's profile."""
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.dependencies import get_authenticator, get_current_user
from app.models.user import User
from app.schemas.auth import MessageResponse, RegisterResponse, UserCreate, UserLogin, UserResponse
from app.services import users
from app.services.auth import Authenticator

router = APIRouter(tags=["auth"])


def _cookie_options() -> dict:
    settings = get_settings()
    # Browsers drop SameSite=None cookies that are not Secure
    secure = settings.is_production
    return {
        "httponly": True,
        "secure": secure,
        "samesite": "none" if secure else "lax",
        "domain": settings.cookie_domain or None,
        "path": "/",
    }


def _set_session_cookie(response: Response, token: str, authenticator: Authenticator) -> None:
    response.set_cookie(
        key=get_settings().session_cookie_name,
        value=token,
        max_age=int(authenticator.ttl.total_seconds()),
        **_cookie_options(),
    )


@router.post("/register", response_model=RegisterResponse)
def register(
    data: UserCreate,
    response: Response,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    user = users.register(db, data.name, data.email, data.password)
    _set_session_cookie(response, authenticator.issue(user.id, user.email), authenticator)
    return RegisterResponse(user=UserResponse.model_validate(user))


@router.post("/login", response_model=UserResponse)
def login(
    data: UserLogin,
    response: Response,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    user = users.authenticate(db, data.email, data.password)
    _set_session_cookie(response, authenticator.issue(user.id, user.email), authenticator)
    return UserResponse.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    response.delete_cookie(get_settings().session_cookie_name, **_cookie_options())
    return MessageResponse(message="Logged out successfully")


@router.get("/profile", response_model=UserResponse)
def profile(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)
