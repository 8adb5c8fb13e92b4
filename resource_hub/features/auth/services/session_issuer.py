from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from resource_hub.features.auth.exceptions import InvalidOrExpiredToken
from resource_hub.features.auth.models.user import UserRole
from resource_hub.platform.config import settings


@dataclass(frozen=True)
class SessionClaims:
    user_id: str
    email: str
    role: UserRole
    issued_at: datetime
    expires_at: datetime


class SessionIssuer:
    """
    Mints and validates stateless bearer tokens (signed JWTs).

    A token carries ``sub`` (user id), ``email``, ``role``, ``iat`` and ``exp``.
    Nothing is stored server-side; validity is the signature plus the expiry.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(days=7),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls) -> "SessionIssuer":
        return cls(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

    def issue(self, user_id: str, email: str, role: UserRole | str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "role": UserRole(role).value,
            "iat": now,
            "exp": now + self.expires_delta,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def validate(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidOrExpiredToken("Token has expired")
        except jwt.PyJWTError:
            raise InvalidOrExpiredToken("Invalid token")

        try:
            role = UserRole(payload.get("role"))
        except ValueError:
            raise InvalidOrExpiredToken("Invalid token")

        email = payload.get("email")
        if not email:
            raise InvalidOrExpiredToken("Invalid token")

        return SessionClaims(
            user_id=payload["sub"],
            email=email,
            role=role,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
