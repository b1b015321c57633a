"""
Use Cases

Organized into domain folders:
- auth/: Signup and login
- invitations/: Invitation lifecycle and public read path
- uploads/: Pre-signed upload grants
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    LoginUseCase,
)
from .invitations import (
    CreateInvitationUseCase,
    ListInvitationsUseCase,
    GetInvitationUseCase,
    UpdateInvitationUseCase,
    DeleteInvitationUseCase,
    UploadInvitationUseCase,
)
from .uploads import (
    RequestUploadGrantUseCase,
)

__all__ = [
    # Auth
    "SignupUseCase",
    "SignupCommand",
    "LoginUseCase",
    # Invitations
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationUseCase",
    "UpdateInvitationUseCase",
    "DeleteInvitationUseCase",
    "UploadInvitationUseCase",
    # Uploads
    "RequestUploadGrantUseCase",
]
