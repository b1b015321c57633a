"""
Login Use Case

Checks credentials and issues a 7-day access token.
"""

from datetime import timedelta

import bcrypt

from invitapp.libs.result import Error, Result, Return
from invitapp.app.services.unit_of_work import UnitOfWork
from invitapp.api.utils.jwt import generate_jwt
from .dtos import LoginResponse, UserInfo

# Hash checked when the email is unknown, so both paths cost the same
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password return the same error
    - JWT carries only the user id and expires after token_ttl
    """

    def __init__(self, uow: UnitOfWork, jwt_secret: str, token_ttl: timedelta):
        self.uow = uow
        self.jwt_secret = jwt_secret
        self.token_ttl = token_ttl

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing token and user info, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                bcrypt.checkpw(password.encode(), _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = bcrypt.checkpw(
                password.encode(), user.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            token = generate_jwt(user.id, self.jwt_secret, self.token_ttl)

            return Return.ok(
                LoginResponse(
                    token=token,
                    user=UserInfo(id=user.id, name=user.name, email=user.email),
                )
            )
