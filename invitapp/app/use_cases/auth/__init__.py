"""
Authentication Use Cases
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .dtos import SignupCommand, UserInfo, LoginResponse

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    # DTOs
    "SignupCommand",
    "UserInfo",
    "LoginResponse",
]
