"""
User Repository

Handles all database operations for the Users table.
"""
import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional
import sqlalchemy
from databases import Database
from taskhub.modules.schema import is_storable_id, tasks, users

logger = logging.getLogger("taskhub.users.repository")


class UserRepository:
    """Repository for user data access."""

    def __init__(self, database: Database):
        self.database = database

    async def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        created_at: datetime
    ) -> int:
        """Create a new user and return user_id."""
        query = (
            users.insert()
            .values(
                username=username,
                email=email,
                password_hash=password_hash,
                created_at=created_at,
            )
            .returning(users.c.id)
        )
        return await self.database.fetch_val(query)

    async def get_by_id(self, user_id: int) -> Optional[Mapping[str, Any]]:
        """Get user by ID."""
        if not is_storable_id(user_id):
            return None
        query = users.select().where(users.c.id == user_id)
        return await self.database.fetch_one(query)

    async def get_by_username(self, username: str) -> Optional[Mapping[str, Any]]:
        """Get user by username."""
        query = users.select().where(users.c.username == username)
        return await self.database.fetch_one(query)

    async def exists(self, user_id: int) -> bool:
        if not is_storable_id(user_id):
            return False
        query = sqlalchemy.select(users.c.id).where(users.c.id == user_id)
        return await self.database.fetch_val(query) is not None

    async def find_taken(self, username: str, email: str, exclude_id: Optional[int] = None) -> List[str]:
        """Return which of username/email already belong to another user."""
        query = sqlalchemy.select(users.c.id, users.c.username, users.c.email).where(
            sqlalchemy.or_(users.c.username == username, users.c.email == email)
        )
        if exclude_id is not None:
            query = query.where(users.c.id != exclude_id)

        taken = []
        for row in await self.database.fetch_all(query):
            if row["username"] == username and "username" not in taken:
                taken.append("username")
            if row["email"] == email and "email" not in taken:
                taken.append("email")
        return taken

    async def update(self, user_id: int, username: str, email: str) -> bool:
        """Update username and email. Returns False if the user does not exist."""
        async with self.database.transaction():
            if not await self.exists(user_id):
                return False
            query = (
                users.update()
                .where(users.c.id == user_id)
                .values(username=username, email=email)
            )
            await self.database.execute(query)
        return True

    async def delete(self, user_id: int) -> bool:
        """
        Delete a user together with all of their tasks.

        The task rows are removed explicitly so the cascade holds on SQLite
        connections where foreign key enforcement is off.
        """
        async with self.database.transaction():
            if not await self.exists(user_id):
                return False
            await self.database.execute(tasks.delete().where(tasks.c.user_id == user_id))
            await self.database.execute(users.delete().where(users.c.id == user_id))
        logger.info(f"Deleted user {user_id} and their tasks")
        return True

    async def list(self) -> List[Mapping[str, Any]]:
        """List all users."""
        query = users.select().order_by(users.c.id)
        return await self.database.fetch_all(query)

    async def list_created_between(
        self,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None
    ) -> List[Mapping[str, Any]]:
        """List users created inside the inclusive [created_from, created_to] window."""
        query = users.select()
        if created_from is not None:
            query = query.where(users.c.created_at >= created_from)
        if created_to is not None:
            query = query.where(users.c.created_at <= created_to)
        query = query.order_by(users.c.created_at, users.c.id)
        return await self.database.fetch_all(query)
