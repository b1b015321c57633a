"""
Invitation Use Case DTOs

Closed input models: unknown fields are rejected instead of being stored.
Field aliases are the JSON names used by the web client.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_OPTIONAL_SCALARS = (
    "host",
    "description",
    "date",
    "time",
    "address",
    "latitude",
    "longitude",
    "music_url",
)


class GalleryItem(BaseModel):
    """Asset reference stored in an invitation gallery"""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class _InvitationFields(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    host: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    address: Optional[str] = None
    latitude: Optional[float] = Field(None, alias="lat", ge=-90, le=90)
    longitude: Optional[float] = Field(None, alias="lng", ge=-180, le=180)
    music_url: Optional[str] = Field(None, alias="musicUrl")

    @field_validator(*_OPTIONAL_SCALARS, mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        # The web form posts "" for untouched inputs
        if isinstance(value, str) and not value.strip():
            return None
        return value


class InvitationData(_InvitationFields):
    """Fields of a new invitation"""

    title: str = Field(..., min_length=1, max_length=255)
    gallery: List[GalleryItem] = Field(default_factory=list)


class InvitationPatch(_InvitationFields):
    """Partial update; only fields present in the payload are applied"""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    gallery: Optional[List[GalleryItem]] = None

    @field_validator("title", "gallery")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class InvitationDetails(BaseModel):
    """Stored invitation, detached from the session that loaded it"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    owner_id: str = Field(..., alias="ownerId")
    title: str
    host: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    address: Optional[str] = None
    latitude: Optional[float] = Field(None, alias="lat")
    longitude: Optional[float] = Field(None, alias="lng")
    music_url: Optional[str] = Field(None, alias="musicUrl")
    gallery: List[GalleryItem] = Field(default_factory=list)
    slug: str
    created_at: dt.datetime = Field(..., alias="createdAt")

    @classmethod
    def from_entity(cls, invitation) -> "InvitationDetails":
        return cls(
            id=invitation.id,
            owner_id=invitation.owner_id,
            title=invitation.title,
            host=invitation.host,
            description=invitation.description,
            date=invitation.date,
            time=invitation.time,
            address=invitation.address,
            latitude=invitation.latitude,
            longitude=invitation.longitude,
            music_url=invitation.music_url,
            gallery=[GalleryItem(**item) for item in invitation.gallery or []],
            slug=invitation.slug,
            created_at=invitation.created_at,
        )
