"""
Upload Use Cases
"""

from .request_upload_grant_use_case import GRANT_TTL_SECONDS, RequestUploadGrantUseCase
from .dtos import UploadGrantResponse

__all__ = [
    "RequestUploadGrantUseCase",
    "UploadGrantResponse",
    "GRANT_TTL_SECONDS",
]
