"""
Use Case: Update Invitation

Owner-scoped partial update.
"""

import logging

from invitapp.libs.result import Error, Result, Return
from invitapp.app.services.unit_of_work import UnitOfWork
from .dtos import InvitationDetails, InvitationPatch

logger = logging.getLogger(__name__)


class UpdateInvitationUseCase:
    """
    Apply a patch to an invitation owned by the caller.

    Business Rules:
    - owner_id, slug, id and created_at are never changed
    - Only fields present in the patch are written

    Errors:
        - INVITATION_NOT_FOUND: no invitation with that id
        - NOT_INVITATION_OWNER: invitation exists but belongs to someone else
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, owner_id: str, invitation_id: str, patch: InvitationPatch
    ) -> Result[InvitationDetails]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.owner_id != owner_id:
                logger.info(
                    f"User {owner_id} tried to update invitation {invitation_id} they do not own"
                )
                return Return.err(
                    Error("NOT_INVITATION_OWNER", "Invitation belongs to another user")
                )

            for name, value in patch.model_dump(exclude_unset=True).items():
                setattr(invitation, name, value)

            invitation = await self.uow.invitations.update(invitation)

            await self.uow.commit()

            return Return.ok(InvitationDetails.from_entity(invitation))
