"""Credential store: registration, login lookup and profile reads."""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.errors import BadPasswordError, DuplicateEmailError, NotFoundError
from app.models.user import User
from app.services.auth import get_password_hash, verify_password


def register(db: Session, name: str, email: str, password: str) -> User:
    """Insert a new user. The unique constraint on email decides races between
    concurrent registrations; the loser gets DuplicateEmailError."""
    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(password, rounds=get_settings().bcrypt_rounds),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateEmailError()
    db.refresh(user)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise NotFoundError("User not found")
    if not verify_password(password, user.hashed_password):
        raise BadPasswordError()
    return user


def get_by_id(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user
