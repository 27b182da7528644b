"""
Task Repository

Handles all database operations for the Tasks table.
"""
import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional
from databases import Database
from taskhub.modules.schema import is_storable_id, tasks

logger = logging.getLogger("taskhub.tasks.repository")


class TaskRepository:
    """Repository for task data access."""

    def __init__(self, database: Database):
        self.database = database

    async def create(
        self,
        user_id: int,
        title: str,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None
    ) -> int:
        """Create a new task and return task_id."""
        query = (
            tasks.insert()
            .values(
                title=title,
                description=description,
                due_date=due_date,
                user_id=user_id,
            )
            .returning(tasks.c.id)
        )
        return await self.database.fetch_val(query)

    async def get_by_id(self, task_id: int) -> Optional[Mapping[str, Any]]:
        """Get task by ID."""
        if not is_storable_id(task_id):
            return None
        query = tasks.select().where(tasks.c.id == task_id)
        return await self.database.fetch_one(query)

    async def list_for_user(self, user_id: int) -> List[Mapping[str, Any]]:
        """List tasks owned by a user."""
        if not is_storable_id(user_id):
            return []
        query = tasks.select().where(tasks.c.user_id == user_id).order_by(tasks.c.id)
        return await self.database.fetch_all(query)
