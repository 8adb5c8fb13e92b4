import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from resource_hub.features.auth.exceptions import (
    AlreadyVerified,
    CodeAlreadyUsed,
    CodeExpired,
    DuplicateAccount,
    InvalidCode,
    NotificationFailed,
    UserNotFound,
)
from resource_hub.features.auth.models.user import User, UserRole
from resource_hub.features.auth.services.credential_store import CredentialStore
from resource_hub.features.auth.services.notifier import EmailNotifier, NotificationResult
from resource_hub.features.auth.services.otp_store import OtpStore
from resource_hub.features.auth.services.session_issuer import SessionIssuer
from resource_hub.features.auth.utils.security import generate_otp, hash_password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationResult:
    user_id: str
    email: str


@dataclass(frozen=True)
class VerificationResult:
    user: User
    token: str


class RegistrationFlow:
    """
    Moves an account from unverified to verified through an emailed one-time code.

    The flow holds no state between calls. Every collaborator is injected, and
    each store write is committed on its own, so a failed notification during
    registration is undone with explicit compensating deletes rather than a
    transaction rollback.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        otps: OtpStore,
        notifier: EmailNotifier,
        sessions: SessionIssuer,
        otp_ttl: timedelta = timedelta(minutes=10),
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.credentials = credentials
        self.otps = otps
        self.notifier = notifier
        self.sessions = sessions
        self.otp_ttl = otp_ttl
        self.clock = clock

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole | str = UserRole.student,
        department: Optional[str] = None,
    ) -> RegistrationResult:
        role = UserRole(role)

        existing = await self.credentials.find_by_email(email)
        if existing is not None:
            if existing.is_verified:
                logger.warning(f"Registration rejected - verified account exists: {email}")
                raise DuplicateAccount()
            await self.credentials.delete_unverified(email)
            logger.info(f"Replacing unverified registration for {email}")

        user = await self.credentials.insert_unverified(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=role,
            department=department,
        )

        result = await self._issue_code(email, name)
        if not result.success:
            logger.error(f"Registration rolled back for {email}: {result.error}")
            await self._compensate_registration(user.id, email)
            raise NotificationFailed()

        logger.info(f"Registration initiated - user: {user.id}, email: {email}")
        return RegistrationResult(user_id=user.id, email=email)

    async def verify_otp(self, email: str, code: str) -> VerificationResult:
        record = await self.otps.find_latest_matching(email, code)
        if record is None:
            logger.warning(f"OTP verification failed - no matching code: {email}")
            raise InvalidCode()

        if self.clock() > record.expires_at:
            logger.warning(f"OTP verification failed - code expired: {email}")
            raise CodeExpired()

        if record.used:
            logger.warning(f"OTP verification failed - code already used: {email}")
            raise CodeAlreadyUsed()

        await self.otps.mark_consumed(record.id)

        affected = await self.credentials.set_verified(email)
        if affected == 0:
            raise UserNotFound()

        user = await self.credentials.find_by_email(email)
        if user is None:
            raise UserNotFound()

        token = self.sessions.issue(user.id, user.email, user.role)
        logger.info(f"Account verified - user: {user.id}, email: {email}")

        await self._send_welcome(user)

        return VerificationResult(user=user, token=token)

    async def resend_otp(self, email: str) -> None:
        user = await self.credentials.find_by_email(email)
        if user is None:
            logger.warning(f"Resend OTP failed - email not found: {email}")
            raise UserNotFound()

        if user.is_verified:
            logger.warning(f"Resend OTP failed - already verified: {email}")
            raise AlreadyVerified()

        result = await self._issue_code(email, user.name)
        if not result.success:
            logger.error(f"Resend OTP failed for {email}: {result.error}")
            raise NotificationFailed()

        logger.info(f"Verification code resent - user: {user.id}, email: {email}")

    async def _issue_code(self, email: str, name: str) -> NotificationResult:
        code = generate_otp()
        expires_at = self.clock() + self.otp_ttl

        await self.otps.delete_all_for_email(email)
        await self.otps.insert(email, code, expires_at)

        return await self.notifier.send_code(email, code, name)

    async def _compensate_registration(self, user_id: str, email: str) -> None:
        try:
            await self.credentials.delete_by_id(user_id)
        except SQLAlchemyError:
            logger.exception(f"Rollback could not delete user {user_id} ({email})")

        try:
            await self.otps.delete_all_for_email(email)
        except SQLAlchemyError:
            logger.exception(f"Rollback could not delete OTP records for {email}")

    async def _send_welcome(self, user: User) -> None:
        try:
            result = await self.notifier.send_welcome(user.email, user.name)
        except Exception as e:
            logger.warning(f"Welcome email failed for {user.email}: {e}")
            return

        if not result.success:
            logger.warning(f"Welcome email failed for {user.email}: {result.error}")
