import bcrypt
from sqlalchemy.exc import IntegrityError

from invitapp.libs.result import Error, Result, Return

from invitapp.app.services.unit_of_work import UnitOfWork
from invitapp.domain.entities import User
from .dtos import SignupCommand, UserInfo


class SignupUseCase:
    """
    Signup Use Case

    Business Logic:
    1. Check if email already exists (the unique index catches signups racing past the check)
    2. Hash password with bcrypt cost factor 12
    3. Create User
    4. Commit and return public user info (no token, the client logs in next)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[UserInfo]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with validated name, email, password

        Returns:
            Result[UserInfo] or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(
                name=command.name,
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # A concurrent signup took the email between check and insert
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            return Return.ok(UserInfo(id=user.id, name=user.name, email=user.email))
