from abc import ABC, abstractmethod
from typing import List, Optional

from invitapp.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: str) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Invitation]:
        """Get invitation by public slug"""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[Invitation]:
        """Get all invitations of an owner, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: Invitation) -> None:
        """Delete an invitation"""
        pass
