from datetime import timedelta

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from invitapp.api.error import ClientError, ServerError
from invitapp.app.services.unit_of_work import UnitOfWork
from invitapp.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    SignupCommand,
    SignupUseCase,
    UserInfo,
)
from invitapp.depends import get_config, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=UserInfo)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Signup

    Creates a new account. The client logs in afterwards to get a token.

    Raises:
        - 400 Bad Request: Email already registered
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    User Login

    Returns a bearer token valid for JWT_EXPIRES_DAYS days and the user.

    Raises:
        - 400 Bad Request: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(
        uow,
        jwt_secret=config.JWT_SECRET,
        token_ttl=timedelta(days=config.JWT_EXPIRES_DAYS),
    )
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
