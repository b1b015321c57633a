"""
InvitApp Domain Entities

Each entity in its own file.
"""

from .user import User
from .invitation import Invitation

__all__ = [
    "User",
    "Invitation",
]
