"""
Use Case: Upload Invitation (server-mediated upload)

The server receives the files, pushes them to object storage itself and
then creates the invitation that references the resulting public URLs.
"""

import logging
from typing import List, Optional

from invitapp.libs.result import Error, Result, Return
from invitapp.app.services.asset_uploader import (
    AssetUploader,
    AssetUploadError,
    PendingUpload,
)
from invitapp.app.services.unit_of_work import UnitOfWork
from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import GalleryItem, InvitationData, InvitationDetails

logger = logging.getLogger(__name__)


class UploadInvitationUseCase:
    """
    Upload gallery and music files, then create the invitation.

    Business Logic:
    1. Upload gallery files in submission order, then the music file
    2. Stop at the first failed upload (earlier objects are not removed)
    3. Create the invitation with gallery/musicUrl taken from the uploads

    Errors:
        - STORAGE_UPLOAD_FAILED: object storage rejected one of the files
    """

    def __init__(self, uow: UnitOfWork, uploader: AssetUploader, create_use_case=None):
        self.uow = uow
        self.uploader = uploader
        self.create_use_case = create_use_case or CreateInvitationUseCase(uow)

    async def execute(
        self,
        owner_id: str,
        data: InvitationData,
        gallery_files: List[PendingUpload],
        music_file: Optional[PendingUpload] = None,
    ) -> Result[InvitationDetails]:
        pendings = list(gallery_files)
        if music_file is not None:
            pendings.append(music_file)

        try:
            uploaded = await self.uploader.upload_all(pendings)
        except AssetUploadError as exc:
            logger.error(f"Server-mediated upload aborted: {exc}")
            return Return.err(Error("STORAGE_UPLOAD_FAILED", str(exc)))

        gallery_assets = uploaded[: len(gallery_files)]
        music_url = uploaded[-1].url if music_file is not None else None

        data = data.model_copy(
            update={
                "gallery": [GalleryItem(name=a.name, url=a.url) for a in gallery_assets],
                "music_url": music_url,
            }
        )
        return await self.create_use_case.execute(owner_id, data)
