"""Account authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from skillswap.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from skillswap.application.usecase.views import PrivateProfileView
from skillswap.config import Settings
from skillswap.domain.service import JWTService
from skillswap.interface.api.envelope import ApiResponse
from skillswap.interface.api.security import AuthToken, require_account_id

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)

COOKIE_NAME = "auth_token"


class RegisterAPIRequest(BaseModel):
    """API request for registering an account."""

    name: str
    email: str
    password: str


class LoginAPIRequest(BaseModel):
    email: str
    password: str


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    is_production = settings.environment == "production"
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> ApiResponse[AuthResponse]:
    """Create an account and log it in.

    Example:
        POST /api/auth/register

        Request:
        {"name": "Ada", "email": "ada@example.com", "password": "secret1"}
    """
    result = await register_use_case.execute(
        RegisterRequest(
            name=request.name, email=request.email, password=request.password
        )
    )
    set_auth_cookie(response, result.token, settings)
    return ApiResponse(message="User registered successfully", data=result)


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> ApiResponse[AuthResponse]:
    """Log in with email and password.

    The token is returned in the body and set as an HTTP-only cookie.
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
    set_auth_cookie(response, result.token, settings)
    return ApiResponse(message="Login successful", data=result)


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response) -> ApiResponse[None]:
    """Clear the auth cookie."""
    response.delete_cookie(key=COOKIE_NAME, path="/")
    return ApiResponse(message="Logged out successfully")


@router.get("/me", response_model=ApiResponse[PrivateProfileView])
async def me(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> ApiResponse[PrivateProfileView]:
    """Get the authenticated account."""
    account_id = require_account_id(jwt_service, token)
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(account_id=account_id)
    )
    return ApiResponse(message="Current user", data=user)
