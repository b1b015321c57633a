import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field, ValidationError, computed_field
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException

from invitapp.api.error import ClientError, ServerError
from invitapp.app.services.asset_uploader import AssetUploader, PendingUpload
from invitapp.app.services.object_storage import IObjectStorage
from invitapp.app.services.unit_of_work import UnitOfWork
from invitapp.app.use_cases.invitations import (
    CreateInvitationUseCase,
    DeleteInvitationUseCase,
    GetInvitationUseCase,
    InvitationData,
    InvitationDetails,
    InvitationPatch,
    ListInvitationsUseCase,
    UpdateInvitationUseCase,
    UploadInvitationUseCase,
)
from invitapp.depends import (
    get_config,
    get_current_user,
    get_event_timezone,
    get_object_storage,
    get_unit_of_work,
)
from invitapp.domain.countdown import Countdown, compute_countdown
from invitapp.libs.result import Error

router = APIRouter(prefix="/invitations", tags=["Invitations"])

# Multipart keys that carry files, or values that only uploads may set
_GALLERY_FIELDS = ("gallery", "gallery[]")
_FILE_FIELDS = _GALLERY_FIELDS + ("music", "musicUrl", "music_url")


class InvitationResponse(InvitationDetails):
    """Invitation as returned to clients, with its public link"""

    share_url: str = Field(..., alias="shareUrl")

    @computed_field(alias="_id")
    @property
    def document_id(self) -> str:
        # Web clients key invitations on the Mongo-style "_id"
        return self.id

    @classmethod
    def from_details(cls, details: InvitationDetails, config) -> "InvitationResponse":
        return cls(
            **details.model_dump(),
            share_url=f"{config.PUBLIC_BASE_URL.rstrip('/')}/invite/{details.slug}",
        )


class PublicInvitationResponse(InvitationResponse):
    """Invitation plus the countdown shown to visitors"""

    countdown: Optional[Countdown] = None


class DeleteInvitationResponse(BaseModel):
    success: bool


@router.get("", status_code=status.HTTP_200_OK, response_model=List[InvitationResponse])
async def list_invitations(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    List My Invitations

    Returns the caller's invitations, newest first.
    """
    use_case = ListInvitationsUseCase(uow)
    result = await use_case.execute(current_user["id"])

    if result.is_err():
        raise ServerError(result.error)

    return [InvitationResponse.from_details(inv, config) for inv in result.value]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InvitationResponse)
async def create_invitation(
    request: InvitationData,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Create Invitation

    Stores invitation metadata. Gallery and musicUrl reference assets the
    client already uploaded with pre-signed grants.

    Raises:
        - 401/403: Missing or invalid token
        - 422 Unprocessable Entity: Missing title or unknown fields
    """
    use_case = CreateInvitationUseCase(uow)
    result = await use_case.execute(current_user["id"], request)

    if result.is_err():
        raise ServerError(result.error)

    return InvitationResponse.from_details(result.value, config)


@router.post(
    "/upload", status_code=status.HTTP_201_CREATED, response_model=InvitationResponse
)
async def upload_invitation(
    request: Request,
    current_user: dict = Depends(get_current_user),
    storage: IObjectStorage = Depends(get_object_storage),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Create Invitation With Server-Side Upload

    Multipart body: invitation fields as form fields, any number of
    `gallery` files and at most one `music` file. The body is only read
    once storage is known to be configured.

    Raises:
        - 400 Bad Request: TOO_MANY_MUSIC_FILES, INVALID_MULTIPART (malformed
          body or more parts than UPLOAD_MAX_FILES / UPLOAD_MAX_FIELDS)
        - 401/403: Missing or invalid token
        - 422 Unprocessable Entity: Invalid form fields
        - 502 Bad Gateway: STORAGE_UPLOAD_FAILED (earlier files stay stored)
        - 503 Service Unavailable: STORAGE_NOT_CONFIGURED
    """
    try:
        form = await request.form(
            max_files=config.UPLOAD_MAX_FILES, max_fields=config.UPLOAD_MAX_FIELDS
        )
    except HTTPException as exc:
        # Starlette reports malformed or oversized multipart bodies this way
        raise ClientError(
            Error("INVALID_MULTIPART", str(exc.detail)),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        fields = {
            key: value
            for key, value in form.multi_items()
            if isinstance(value, str) and key not in _FILE_FIELDS
        }
        try:
            data = InvitationData.model_validate(fields)
        except ValidationError as exc:
            raise RequestValidationError(
                exc.errors(include_url=False, include_context=False)
            )

        gallery_files = [
            _pending(value)
            for key, value in form.multi_items()
            if key in _GALLERY_FIELDS and _is_file(value)
        ]
        music_files = [
            _pending(upload) for upload in form.getlist("music") if _is_file(upload)
        ]
        if len(music_files) > 1:
            raise ClientError(
                Error("TOO_MANY_MUSIC_FILES", "At most one music file is allowed"),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        uploader = AssetUploader(
            storage, key_prefix=config.S3_KEY_PREFIX, tmp_dir=config.UPLOAD_TMP_DIR
        )
        use_case = UploadInvitationUseCase(uow, uploader)
        result = await use_case.execute(
            current_user["id"],
            data,
            gallery_files,
            music_files[0] if music_files else None,
        )
    finally:
        await form.close()

    if result.is_err():
        error = result.error
        if error.code == "STORAGE_UPLOAD_FAILED":
            raise ServerError(error, status_code=status.HTTP_502_BAD_GATEWAY)
        raise ServerError(error)

    return InvitationResponse.from_details(result.value, config)


def _is_file(value) -> bool:
    # Browsers send an empty part for an untouched file input
    return isinstance(value, UploadFile) and bool(value.filename)


def _pending(upload: UploadFile) -> PendingUpload:
    return PendingUpload(
        filename=upload.filename, file=upload.file, content_type=upload.content_type
    )


@router.get(
    "/{id_or_slug}",
    status_code=status.HTTP_200_OK,
    response_model=PublicInvitationResponse,
)
async def get_invitation(
    id_or_slug: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
    event_timezone=Depends(get_event_timezone),
):
    """
    Public Invitation

    Resolves an id (24 hex chars) or a slug. No authentication.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
    """
    use_case = GetInvitationUseCase(uow)
    result = await use_case.execute(id_or_slug)

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    invitation = result.value
    response = PublicInvitationResponse.from_details(invitation, config)
    response.countdown = compute_countdown(
        invitation.date,
        invitation.time,
        now=dt.datetime.now(dt.UTC),
        tz=event_timezone,
    )
    return response


@router.put(
    "/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=Optional[InvitationResponse],
)
async def update_invitation(
    invitation_id: str,
    request: InvitationPatch,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Update Invitation

    Applies the fields present in the body. Returns null when no invitation
    with this id belongs to the caller; "missing" and "owned by someone
    else" are deliberately not told apart.
    """
    use_case = UpdateInvitationUseCase(uow)
    result = await use_case.execute(current_user["id"], invitation_id, request)

    if result.is_err():
        error = result.error
        if error.code in ("INVITATION_NOT_FOUND", "NOT_INVITATION_OWNER"):
            return None
        raise ServerError(error)

    return InvitationResponse.from_details(result.value, config)


@router.delete(
    "/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteInvitationResponse,
)
async def delete_invitation(
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Invitation

    Always answers {"success": true} for a missing or foreign invitation,
    so the endpoint cannot be used to probe ids.
    """
    use_case = DeleteInvitationUseCase(uow)
    result = await use_case.execute(current_user["id"], invitation_id)

    if result.is_err():
        error = result.error
        if error.code not in ("INVITATION_NOT_FOUND", "NOT_INVITATION_OWNER"):
            raise ServerError(error)

    return DeleteInvitationResponse(success=True)
