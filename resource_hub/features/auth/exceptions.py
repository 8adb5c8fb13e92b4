from fastapi import status


class AuthFlowError(Exception):
    """Base class for user-facing registration, verification and session errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "auth_error"
    default_message: str = "Authentication error"

    def __init__(self, message: str | None = None, **data):
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)


class DuplicateAccount(AuthFlowError):
    status_code = status.HTTP_409_CONFLICT
    code = "duplicate_account"
    default_message = "User already exists with this email"


class NotificationFailed(AuthFlowError):
    status_code = status.HTTP_502_BAD_GATEWAY
    code = "notification_failed"
    default_message = "Failed to send verification email"


class InvalidCode(AuthFlowError):
    code = "invalid_code"
    default_message = "Invalid OTP code"


class CodeExpired(AuthFlowError):
    code = "code_expired"
    default_message = "OTP has expired. Please request a new one."


class CodeAlreadyUsed(AuthFlowError):
    code = "code_already_used"
    default_message = "OTP has already been used"


class UserNotFound(AuthFlowError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "user_not_found"
    default_message = "User not found"


class AlreadyVerified(AuthFlowError):
    code = "already_verified"
    default_message = "Account is already verified"


class InvalidOrExpiredToken(AuthFlowError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_or_expired_token"
    default_message = "Invalid or expired token"


class InvalidCredentials(AuthFlowError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_credentials"
    default_message = "Invalid email or password"


class AccountNotVerified(AuthFlowError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "account_not_verified"
    default_message = "Account not verified. Please check your email for the verification code."
