from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from invitapp.app.repositories.invitation_repository import IInvitationRepository
from invitapp.domain.entities import Invitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: str) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Invitation]:
        """Get invitation by public slug"""
        stmt = select(Invitation).where(Invitation.slug == slug)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_owner(self, owner_id: str) -> List[Invitation]:
        """Get all invitations of an owner, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.owner_id == owner_id)
            .order_by(Invitation.created_at.desc(), Invitation.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete(self, invitation: Invitation) -> None:
        """Delete an invitation"""
        await self.session.delete(invitation)
        await self.session.flush()
