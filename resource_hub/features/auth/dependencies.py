from datetime import timedelta

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.auth.exceptions import InvalidOrExpiredToken
from resource_hub.features.auth.models.user import User, UserRole
from resource_hub.features.auth.services import (
    AuthService,
    CredentialStore,
    EmailNotifier,
    OtpStore,
    RegistrationFlow,
    SessionIssuer,
)
from resource_hub.platform.config import settings
from resource_hub.platform.db.session import get_db

security = HTTPBearer()


def get_session_issuer() -> SessionIssuer:
    return SessionIssuer.from_settings()


def get_notifier() -> EmailNotifier:
    return EmailNotifier()


def get_registration_flow(
    db: AsyncSession = Depends(get_db),
    notifier: EmailNotifier = Depends(get_notifier),
    sessions: SessionIssuer = Depends(get_session_issuer),
) -> RegistrationFlow:
    return RegistrationFlow(
        credentials=CredentialStore(db),
        otps=OtpStore(db),
        notifier=notifier,
        sessions=sessions,
        otp_ttl=timedelta(minutes=settings.OTP_EXPIRE_MINUTES),
    )


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    sessions: SessionIssuer = Depends(get_session_issuer),
) -> AuthService:
    return AuthService(CredentialStore(db), sessions)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
    sessions: SessionIssuer = Depends(get_session_issuer),
) -> User:
    """
    Dependency to get the current authenticated user.
    """
    try:
        claims = sessions.validate(credentials.credentials)
    except InvalidOrExpiredToken as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await CredentialStore(db).find_by_id(claims.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found. Please login again.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_verified:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account not verified",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def require_role(*roles: UserRole):
    """Build a dependency that only lets the given roles through."""

    async def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            names = " or ".join(role.value.capitalize() for role in roles)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail=f"{names} access required"
            )
        return user

    return checker


get_current_admin = require_role(UserRole.admin)
