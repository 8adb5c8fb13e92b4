from resource_hub.features.auth.services.auth_service import AuthService
from resource_hub.features.auth.services.credential_store import CredentialStore
from resource_hub.features.auth.services.notifier import EmailNotifier, NotificationResult
from resource_hub.features.auth.services.otp_store import OtpStore
from resource_hub.features.auth.services.registration import (
    RegistrationFlow,
    RegistrationResult,
    VerificationResult,
)
from resource_hub.features.auth.services.session_issuer import SessionClaims, SessionIssuer

__all__ = [
    "AuthService",
    "CredentialStore",
    "EmailNotifier",
    "NotificationResult",
    "OtpStore",
    "RegistrationFlow",
    "RegistrationResult",
    "SessionClaims",
    "SessionIssuer",
    "VerificationResult",
]
