import logging

from resource_hub.features.auth.exceptions import AccountNotVerified, InvalidCredentials
from resource_hub.features.auth.services.credential_store import CredentialStore
from resource_hub.features.auth.services.registration import VerificationResult
from resource_hub.features.auth.services.session_issuer import SessionIssuer
from resource_hub.features.auth.utils.security import verify_password

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, credentials: CredentialStore, sessions: SessionIssuer):
        self.credentials = credentials
        self.sessions = sessions

    async def login_user(self, email: str, password: str) -> VerificationResult:
        user = await self.credentials.find_by_email(email)
        if user is None:
            raise InvalidCredentials()

        if not user.is_verified:
            logger.info(f"Login blocked for unverified account: {email}")
            raise AccountNotVerified(requires_verification=True, email=email)

        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed - wrong password: {email}")
            raise InvalidCredentials()

        token = self.sessions.issue(user.id, user.email, user.role)
        return VerificationResult(user=user, token=token)
