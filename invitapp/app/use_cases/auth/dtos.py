"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
"""

from pydantic import BaseModel


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    """

    name: str
    email: str
    password: str


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: str
    name: str
    email: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    token: str
    user: UserInfo
