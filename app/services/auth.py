"""Password hashing and signed session tokens (JWT)."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.errors import AuthError, AuthFailure


def _pwd_bytes(password: str, max_len: int = 72) -> bytes:
    return password.encode("utf-8")[:max_len]


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_pwd_bytes(plain), hashed.encode("utf-8"))
    except (TypeError, ValueError):
        return False


def get_password_hash(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(_pwd_bytes(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


@dataclass(frozen=True)
class SessionClaims:
    user_id: int
    email: str
    issued_at: datetime | None = None


class Authenticator:
    """Issues and verifies session tokens. Holds no state beyond its configuration."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = timedelta(days=7)):
        if not secret:
            raise ValueError("A JWT signing secret is required (set JWT_SECRET_KEY)")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: int, email: str) -> str:
        now = datetime.now(timezone.utc)
        # PyJWT expects "sub" to be a string
        payload = {"sub": str(user_id), "email": email, "iat": now, "exp": now + self.ttl}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> SessionClaims:
        if not token or not token.strip():
            raise AuthError(AuthFailure.missing)
        try:
            payload = jwt.decode(
                token.strip(),
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthError(AuthFailure.expired)
        except jwt.PyJWTError:
            raise AuthError(AuthFailure.invalid)
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise AuthError(AuthFailure.invalid)
        iat = payload.get("iat")
        issued_at = datetime.fromtimestamp(iat, tz=timezone.utc) if isinstance(iat, (int, float)) else None
        return SessionClaims(user_id=user_id, email=payload.get("email") or "", issued_at=issued_at)
