from resource_hub.features.auth.schemas.auth import (
    AuthTokenResponse,
    LoginRequest,
    RegisterRequest,
    RegistrationResponse,
    ResendOtpRequest,
    UserResponse,
    VerifyOtpRequest,
)

__all__ = [
    "AuthTokenResponse",
    "LoginRequest",
    "RegisterRequest",
    "RegistrationResponse",
    "ResendOtpRequest",
    "UserResponse",
    "VerifyOtpRequest",
]
