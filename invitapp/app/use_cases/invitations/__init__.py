"""
Invitation Use Cases
"""

from .create_invitation_use_case import CreateInvitationUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .get_invitation_use_case import GetInvitationUseCase
from .update_invitation_use_case import UpdateInvitationUseCase
from .delete_invitation_use_case import DeleteInvitationUseCase
from .upload_invitation_use_case import UploadInvitationUseCase
from .dtos import GalleryItem, InvitationData, InvitationDetails, InvitationPatch

__all__ = [
    # Use Cases
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationUseCase",
    "UpdateInvitationUseCase",
    "DeleteInvitationUseCase",
    "UploadInvitationUseCase",
    # DTOs
    "GalleryItem",
    "InvitationData",
    "InvitationDetails",
    "InvitationPatch",
]
