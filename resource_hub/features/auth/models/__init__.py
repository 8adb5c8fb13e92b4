from resource_hub.features.auth.models.otp import OtpVerification
from resource_hub.features.auth.models.user import User, UserRole

__all__ = ["OtpVerification", "User", "UserRole"]
