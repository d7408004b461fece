"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .register import AuthResponse, RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
