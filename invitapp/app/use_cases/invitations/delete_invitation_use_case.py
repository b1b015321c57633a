import logging

from invitapp.libs.result import Error, Result, Return
from invitapp.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteInvitationUseCase:
    """
    Delete an invitation owned by the caller.

    Errors:
        - INVITATION_NOT_FOUND: no invitation with that id
        - NOT_INVITATION_OWNER: invitation exists but belongs to someone else
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, owner_id: str, invitation_id: str) -> Result[None]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.owner_id != owner_id:
                logger.info(
                    f"User {owner_id} tried to delete invitation {invitation_id} they do not own"
                )
                return Return.err(
                    Error("NOT_INVITATION_OWNER", "Invitation belongs to another user")
                )

            await self.uow.invitations.delete(invitation)

            await self.uow.commit()

            return Return.ok(None)
