"""
Invitation Entity

Public event invitation owned by a single user.
"""

import datetime as dt
from typing import List, Optional

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from ..base import generate_object_id


class Invitation(SQLModel, table=True):
    """
    Invitation entity - event details shared through a public slug.

    Business Rules:
    - owner_id is set at creation and never changes
    - slug is derived once from the title and is unique and immutable
    - gallery keeps the order in which assets were submitted
    - anyone can read an invitation; only the owner can change or delete it
    """

    __tablename__ = "invitations"

    id: str = Field(default_factory=generate_object_id, primary_key=True, max_length=24)
    owner_id: str = Field(foreign_key="users.id", nullable=False, index=True, max_length=24)

    title: str = Field(max_length=255)
    host: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None

    date: Optional[dt.date] = None
    time: Optional[dt.time] = None

    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    music_url: Optional[str] = None
    # [{"name": ..., "url": ...}] in submission order
    gallery: List[dict] = Field(default_factory=list, sa_column=Column(JSON))

    slug: str = Field(unique=True, index=True, max_length=255)

    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_invitation_owner_created", "owner_id", "created_at"),)
