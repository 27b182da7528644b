"""
User Service

Business logic for user management operations.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple
from email_validator import EmailNotValidError, validate_email
from taskhub.modules.clock import to_naive_utc, utcnow
from taskhub.modules.database import INTEGRITY_ERRORS
from taskhub.modules.errors import ConflictError, InternalError, NotFoundError, ValidationError
from taskhub.modules.schema import EMAIL_MAX_LENGTH, USERNAME_MAX_LENGTH
from taskhub.modules.users.domain.user import User
from taskhub.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("taskhub.users.service")


def validate_identity(username: Optional[str], email: Optional[str]) -> Tuple[str, str]:
    """
    Trim and validate a username/email pair.

    Raises:
        ValidationError: If either is blank, too long, or the email is malformed
    """
    username = (username or "").strip()
    email = (email or "").strip()

    if not username or not email:
        raise ValidationError("Username and Email are required.")
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(f"Username must be at most {USERNAME_MAX_LENGTH} characters.")
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"Email must be at most {EMAIL_MAX_LENGTH} characters.")

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(f"Invalid email address: {e}")

    return username, email


class UserService:
    """Service for user business logic."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create_user(
        self,
        username: Optional[str],
        email: Optional[str],
        password_hash: str = ""
    ) -> User:
        """Create a new user account."""
        username, email = validate_identity(username, email)
        logger.debug(f"[UserService.create_user] username={username}, email={email}")

        taken = await self.repository.find_taken(username, email)
        if taken:
            raise ConflictError(f"A user with this {' and '.join(taken)} already exists.")

        try:
            user_id = await self.repository.create(
                username=username,
                email=email,
                password_hash=password_hash,
                created_at=utcnow()
            )
        except INTEGRITY_ERRORS as e:
            # Lost a race against a concurrent registration
            logger.warning(f"[UserService.create_user] constraint violation: {e}")
            raise ConflictError("A user with this username or email already exists.") from e

        logger.info(f"[UserService.create_user] Created user {user_id}")
        return await self.get_user(user_id)

    async def get_user(self, user_id: int) -> User:
        """Get user by ID."""
        logger.debug(f"[UserService.get_user] user_id={user_id}")

        user_data = await self.repository.get_by_id(user_id)
        if not user_data:
            raise NotFoundError(f"User {user_id} not found.")
        return User.from_dict(user_data)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username, or None."""
        user_data = await self.repository.get_by_username(username)
        if not user_data:
            return None
        return User.from_dict(user_data)

    async def update_user(
        self,
        user_id: int,
        username: Optional[str],
        email: Optional[str]
    ) -> None:
        """Update username and email of an existing user."""
        username, email = validate_identity(username, email)
        logger.debug(f"[UserService.update_user] user_id={user_id}")

        if not await self.repository.exists(user_id):
            raise NotFoundError(f"User {user_id} not found.")

        try:
            updated = await self.repository.update(user_id, username=username, email=email)
        except Exception as e:
            logger.error(f"[UserService.update_user] ERROR: {e}", exc_info=True)
            raise InternalError("Failed to update user.") from e

        if not updated:
            raise NotFoundError(f"User {user_id} not found.")
        logger.info(f"[UserService.update_user] Updated user {user_id}")

    async def delete_user(self, user_id: int) -> None:
        """Delete a user and, by cascade, all of their tasks."""
        logger.debug(f"[UserService.delete_user] user_id={user_id}")

        if not await self.repository.delete(user_id):
            raise NotFoundError(f"User {user_id} not found.")

    async def list_users(self) -> List[User]:
        """List all users."""
        users_data = await self.repository.list()
        return [User.from_dict(user_data) for user_data in users_data]

    async def list_new_users(
        self,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None
    ) -> List[User]:
        """List users created within an optional inclusive window."""
        created_from = to_naive_utc(created_from)
        created_to = to_naive_utc(created_to)
        logger.debug(f"[UserService.list_new_users] from={created_from}, to={created_to}")

        users_data = await self.repository.list_created_between(created_from, created_to)
        return [User.from_dict(user_data) for user_data in users_data]
