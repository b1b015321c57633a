from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from invitapp.api.error import ServerError
from invitapp.app.services.object_storage import IObjectStorage
from invitapp.app.use_cases.uploads import RequestUploadGrantUseCase, UploadGrantResponse
from invitapp.depends import get_config, get_current_user, get_object_storage

router = APIRouter(prefix="/s3", tags=["Uploads"])


class PresignRequest(BaseModel):
    """Pre-signed upload request payload"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    filename: str = Field(..., min_length=1, max_length=1024)
    content_type: str = Field(
        ...,
        alias="contentType",
        min_length=1,
        pattern=r"^[\w.+-]+/[\w.+-]+$",
        description="MIME type, e.g. image/jpeg",
    )


@router.post(
    "/presign",
    status_code=status.HTTP_200_OK,
    response_model=UploadGrantResponse,
)
async def presign_upload(
    request: PresignRequest,
    current_user: dict = Depends(get_current_user),
    storage: IObjectStorage = Depends(get_object_storage),
    config=Depends(get_config),
):
    """
    Request Upload Grant

    Returns a PUT URL valid for PRESIGN_EXPIRES_SECONDS (one hour), bound to
    a fresh key and the given content type, plus the object's public URL.

    Raises:
        - 401 Unauthorized: No token
        - 403 Forbidden: Invalid or expired token
        - 422 Unprocessable Entity: Empty filename or malformed content type
        - 502 Bad Gateway: Storage client could not sign the request
        - 503 Service Unavailable: Object storage not configured
    """
    use_case = RequestUploadGrantUseCase(
        storage,
        key_prefix=config.S3_KEY_PREFIX,
        expires_in=config.PRESIGN_EXPIRES_SECONDS,
    )
    result = await use_case.execute(request.filename, request.content_type)

    if result.is_err():
        raise ServerError(result.error, status_code=status.HTTP_502_BAD_GATEWAY)

    return result.value
