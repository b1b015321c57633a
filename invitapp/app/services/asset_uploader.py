"""
Server-side asset upload loop.

Each incoming file is buffered to a transient local file, pushed to object
storage under a freshly derived key and the local copy removed whether the
upload worked or not. Files are processed one at a time in submission order.
A failure stops the loop; objects already written stay in the store.
"""

import asyncio
import logging
import mimetypes
import os
import shutil
import tempfile
from dataclasses import dataclass
from typing import BinaryIO, Callable, List, Optional

from invitapp.app.services.object_storage import IObjectStorage, StorageError
from invitapp.domain.slug import default_clock
from invitapp.domain.storage_key import build_storage_key

logger = logging.getLogger(__name__)


@dataclass
class PendingUpload:
    """A file received from the client, not yet in object storage"""

    filename: str
    file: BinaryIO
    content_type: Optional[str] = None


@dataclass
class UploadedAsset:
    name: str
    key: str
    url: str


class AssetUploadError(Exception):
    """Upload of one file failed; uploaded lists the objects already written"""

    def __init__(self, filename: str, reason: str, uploaded: List[UploadedAsset]):
        self.filename = filename
        self.reason = reason
        self.uploaded = uploaded
        super().__init__(f"Upload of {filename} failed: {reason}")


class AssetUploader:
    def __init__(
        self,
        storage: IObjectStorage,
        key_prefix: str,
        tmp_dir: Optional[str] = None,
        clock: Callable[[], int] = default_clock,
    ):
        self.storage = storage
        self.key_prefix = key_prefix
        self.tmp_dir = tmp_dir
        self.clock = clock

    async def upload(self, pending: PendingUpload) -> UploadedAsset:
        """Buffer, upload and clean up a single file"""
        key = build_storage_key(self.key_prefix, pending.filename, self.clock())
        content_type = (
            pending.content_type
            or mimetypes.guess_type(pending.filename)[0]
            or "application/octet-stream"
        )

        path = await asyncio.to_thread(self._buffer, pending.file)
        try:
            await self.storage.upload_file(path, key, content_type)
        finally:
            os.remove(path)

        logger.info(f"Uploaded asset {pending.filename} as {key}")
        return UploadedAsset(name=pending.filename, key=key, url=self.storage.public_url(key))

    async def upload_all(self, pendings: List[PendingUpload]) -> List[UploadedAsset]:
        """
        Upload files in order.

        Raises:
            AssetUploadError: on the first storage failure; earlier uploads
                are reported in the exception and are not rolled back
        """
        uploaded: List[UploadedAsset] = []
        for pending in pendings:
            try:
                uploaded.append(await self.upload(pending))
            except StorageError as exc:
                if uploaded:
                    logger.warning(
                        f"Orphaned objects after failed upload: {[a.key for a in uploaded]}"
                    )
                raise AssetUploadError(pending.filename, str(exc), uploaded) from exc
        return uploaded

    def _buffer(self, source: BinaryIO) -> str:
        if self.tmp_dir:
            os.makedirs(self.tmp_dir, exist_ok=True)
        fd, path = tempfile.mkstemp(prefix="upload-", dir=self.tmp_dir)
        try:
            with os.fdopen(fd, "wb") as target:
                shutil.copyfileobj(source, target)
        except BaseException:
            os.remove(path)
            raise
        return path
