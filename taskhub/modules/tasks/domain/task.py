"""
Task Domain Model
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional
from taskhub.modules.clock import as_utc


@dataclass
class Task:
    """Task domain model."""
    id: int
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    user_id: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        """Create Task from a database row or dictionary."""
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            due_date=data["due_date"],
            user_id=data["user_id"],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": as_utc(self.due_date),
            "user_id": self.user_id,
        }
