"""
Use Case: Request Upload Grant (pre-signed mode)

The client uploads the bytes straight to object storage with the returned
URL and later registers publicUrl in an invitation. Grants are not tracked:
the server never learns whether a grant was used.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Callable

from invitapp.libs.result import Error, Result, Return
from invitapp.app.services.object_storage import IObjectStorage, StorageError
from invitapp.domain.slug import default_clock
from invitapp.domain.storage_key import build_storage_key
from .dtos import UploadGrantResponse

logger = logging.getLogger(__name__)

GRANT_TTL_SECONDS = 3600


class RequestUploadGrantUseCase:
    """
    Issue a write grant bound to a fresh key and content type.

    Errors:
        - PRESIGN_FAILED: object storage client could not sign the request
    """

    def __init__(
        self,
        storage: IObjectStorage,
        key_prefix: str,
        expires_in: int = GRANT_TTL_SECONDS,
        clock: Callable[[], int] = default_clock,
        now: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        self.storage = storage
        self.key_prefix = key_prefix
        self.expires_in = expires_in
        self.clock = clock
        self.now = now

    async def execute(self, filename: str, content_type: str) -> Result[UploadGrantResponse]:
        """
        Args:
            filename: Client-side file name, used (sanitized) in the key
            content_type: MIME type the upload must be sent with

        Returns:
            Result[UploadGrantResponse] with write URL, key and public URL
        """
        key = build_storage_key(self.key_prefix, filename, self.clock())
        issued_at = self.now()

        try:
            url = await self.storage.presign_put(key, content_type, self.expires_in)
        except StorageError as exc:
            logger.error(f"Could not presign upload for {key}: {exc}")
            return Return.err(Error("PRESIGN_FAILED", "Could not create upload URL"))

        logger.info(f"Issued upload grant for {key}")
        return Return.ok(
            UploadGrantResponse(
                url=url,
                key=key,
                public_url=self.storage.public_url(key),
                expires_in=self.expires_in,
                expires_at=issued_at + timedelta(seconds=self.expires_in),
            )
        )
