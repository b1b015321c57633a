"""
User Entity

Represents a person who owns invitations.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import generate_object_id


class User(SQLModel, table=True):
    """
    User entity - account that creates and owns invitations.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (salted, cost factor 12)
    - No profile editing; accounts are only created at signup
    """

    __tablename__ = "users"

    id: str = Field(default_factory=generate_object_id, primary_key=True, max_length=24)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
