"""
User Domain Model

Pure data model representing a user entity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping
from taskhub.modules.clock import as_utc


@dataclass
class User:
    """User domain model."""
    id: int
    username: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Create User from a database row or dictionary."""
        return cls(
            id=data["id"],
            username=data["username"],
            email=data["email"],
            password_hash=data["password_hash"] or "",
            created_at=data["created_at"],
        )

    def to_dict(self) -> dict:
        """Convert User to its public representation (never includes the hash)."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "created_at": as_utc(self.created_at),
        }
