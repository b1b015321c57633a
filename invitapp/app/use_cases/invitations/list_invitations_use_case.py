from typing import List

from invitapp.libs.result import Result, Return
from invitapp.app.services.unit_of_work import UnitOfWork
from .dtos import InvitationDetails


class ListInvitationsUseCase:
    """List the caller's invitations, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, owner_id: str) -> Result[List[InvitationDetails]]:
        async with self.uow:
            invitations = await self.uow.invitations.list_by_owner(owner_id)
            return Return.ok([InvitationDetails.from_entity(inv) for inv in invitations])
