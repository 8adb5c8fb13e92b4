from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from resource_hub.features.auth.models.user import UserRole


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters")
    role: UserRole = UserRole.student
    department: Optional[str] = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be blank")
        return v


class VerifyOtpRequest(BaseModel):
    email: EmailStr
    otp: str


class ResendOtpRequest(BaseModel):
    email: EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: UserRole
    department: Optional[str] = None

    class Config:
        from_attributes = True


class RegistrationResponse(BaseModel):
    user_id: str
    email: str


class AuthTokenResponse(BaseModel):
    user: UserResponse
    token: str
    token_type: str = "bearer"
