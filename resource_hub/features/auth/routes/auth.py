from fastapi import APIRouter, Depends, status

from resource_hub.features.auth.dependencies import (
    get_auth_service,
    get_current_user,
    get_registration_flow,
)
from resource_hub.features.auth.models.user import User
from resource_hub.features.auth.schemas.auth import (
    AuthTokenResponse,
    LoginRequest,
    RegisterRequest,
    RegistrationResponse,
    ResendOtpRequest,
    UserResponse,
    VerifyOtpRequest,
)
from resource_hub.features.auth.services import AuthService, RegistrationFlow
from resource_hub.platform.response import api_response

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an unverified account and email a one-time verification code",
)
async def register(
    request: RegisterRequest,
    flow: RegistrationFlow = Depends(get_registration_flow),
):
    """
    Step 1 of registration.
    An existing unverified account for the same email is replaced.
    """
    result = await flow.register(
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
        department=request.department,
    )

    return api_response(
        data=RegistrationResponse(user_id=result.user_id, email=result.email),
        message="Registration initiated. Please check your email for the OTP verification code.",
        status_code=status.HTTP_201_CREATED,
    )


@router.post(
    "/verify-otp",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Verify account with OTP",
    description="Verify a new account using the code sent to its email and receive a token",
)
async def verify_otp(
    request: VerifyOtpRequest,
    flow: RegistrationFlow = Depends(get_registration_flow),
):
    result = await flow.verify_otp(request.email, request.otp)

    return api_response(
        data=AuthTokenResponse(user=UserResponse.model_validate(result.user), token=result.token),
        message="Account verified successfully",
        status_code=status.HTTP_200_OK,
    )


@router.post(
    "/resend-otp",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Resend verification code",
)
async def resend_otp(
    request: ResendOtpRequest,
    flow: RegistrationFlow = Depends(get_registration_flow),
):
    await flow.resend_otp(request.email)

    return api_response(
        message="New OTP sent successfully. Please check your email.",
        status_code=status.HTTP_200_OK,
    )


@router.post(
    "/login",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Login user",
    description="Authenticate a verified user with email and password",
)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    result = await auth_service.login_user(request.email, request.password)

    return api_response(
        data=AuthTokenResponse(user=UserResponse.model_validate(result.user), token=result.token),
        message="Login successful",
        status_code=status.HTTP_200_OK,
    )


@router.get(
    "/me",
    response_model=dict,
    status_code=status.HTTP_200_OK,
    summary="Current user profile",
)
async def me(user: User = Depends(get_current_user)):
    return api_response(
        data=UserResponse.model_validate(user),
        message="Profile retrieved successfully",
        status_code=status.HTTP_200_OK,
    )
