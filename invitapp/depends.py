from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from invitapp.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from invitapp.api.error import ClientError, ServerError
from invitapp.api.utils.jwt import verify_jwt
from invitapp.app.services.object_storage import IObjectStorage
from invitapp.libs.result import Error

# auto_error=False so a missing token gets our own 401 instead of FastAPI's
security = HTTPBearer(auto_error=False)


def get_config(request: Request):
    return request.app.state.config


def get_event_timezone(request: Request):
    return request.app.state.event_timezone


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing the user id

    Raises:
        ClientError: 401 if no bearer token was sent,
            403 if the token is invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("TOKEN_REQUIRED", "Authorization token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials, request.app.state.config.JWT_SECRET)
    if payload is None or not payload.get("id"):
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    request.state.user_id = payload["id"]
    return payload


def get_object_storage(request: Request) -> IObjectStorage:
    """
    Object storage configured at startup.

    Raises:
        ServerError: 503 if no bucket/region was configured
    """
    storage = request.app.state.object_storage
    if storage is None:
        raise ServerError(
            Error("STORAGE_NOT_CONFIGURED", "Object storage is not configured"),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return storage
