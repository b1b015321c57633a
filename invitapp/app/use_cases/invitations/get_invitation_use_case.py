"""
Use Case: Get Invitation (public read path)

Resolves a public identifier to one invitation. No authentication.
"""

from invitapp.libs.result import Error, Result, Return
from invitapp.app.services.unit_of_work import UnitOfWork
from invitapp.domain.base import is_object_id
from .dtos import InvitationDetails


class GetInvitationUseCase:
    """
    Resolve an id or slug to an invitation.

    Dispatch rule:
    1. If the identifier looks like a record id (24 hex chars), try the id
    2. Otherwise, or when the id lookup misses, try it as a slug
    3. First match wins

    Generated slugs always contain a hyphen, so they never look like ids;
    the slug fallback still serves a 24-hex slug stored by other means.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identifier: str) -> Result[InvitationDetails]:
        async with self.uow:
            invitation = None
            if is_object_id(identifier):
                invitation = await self.uow.invitations.get_by_id(identifier.lower())

            if invitation is None:
                invitation = await self.uow.invitations.get_by_slug(identifier)

            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            return Return.ok(InvitationDetails.from_entity(invitation))
