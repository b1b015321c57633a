from typing import Callable

from invitapp.libs.result import Result, Return
from invitapp.app.services.unit_of_work import UnitOfWork
from invitapp.domain.entities import Invitation
from invitapp.domain.slug import default_clock, generate_slug
from .dtos import InvitationData, InvitationDetails


class CreateInvitationUseCase:
    """
    Persist a new invitation for its owner.

    Business Logic:
    1. Derive the slug from the title and a millisecond timestamp
    2. Store the invitation with the caller as immutable owner
    3. Commit and return the stored record
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], int] = default_clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, owner_id: str, data: InvitationData) -> Result[InvitationDetails]:
        async with self.uow:
            invitation = Invitation(
                owner_id=owner_id,
                title=data.title,
                host=data.host,
                description=data.description,
                date=data.date,
                time=data.time,
                address=data.address,
                latitude=data.latitude,
                longitude=data.longitude,
                music_url=data.music_url,
                gallery=[item.model_dump() for item in data.gallery],
                slug=generate_slug(data.title, self.clock()),
            )
            invitation = await self.uow.invitations.create(invitation)

            await self.uow.commit()

            return Return.ok(InvitationDetails.from_entity(invitation))
