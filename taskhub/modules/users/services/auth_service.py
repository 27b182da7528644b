"""
Authentication Service

Registration and credential checks.
"""
import logging
from typing import Optional
from taskhub.modules.errors import UnauthorizedError, ValidationError
from taskhub.modules.users.auth.passwords import hash_password, verify_password
from taskhub.modules.users.auth.tokens import IssuedToken, TokenService
from taskhub.modules.users.domain.user import User
from taskhub.modules.users.services.user_service import UserService

logger = logging.getLogger("taskhub.users.auth_service")


class AuthService:
    """Service for registration and login."""

    def __init__(self, user_service: UserService, token_service: TokenService):
        self.user_service = user_service
        self.token_service = token_service

    async def register(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str]
    ) -> User:
        """
        Register a new account.

        Raises:
            ValidationError: If any field is blank or the email is malformed
            ConflictError: If the username or email is already taken
        """
        if not password or not password.strip():
            raise ValidationError("Username, Email and Password are required.")

        user = await self.user_service.create_user(
            username=username,
            email=email,
            password_hash=hash_password(password)
        )
        logger.info(f"[AuthService.register] Registered user {user.id}")
        return user

    async def login(self, username: Optional[str], password: Optional[str]) -> IssuedToken:
        """
        Check credentials and issue a bearer token.

        Raises:
            UnauthorizedError: If the username is unknown or the password is wrong
        """
        username = (username or "").strip()
        user = await self.user_service.get_user_by_username(username) if username else None

        if user is None or not verify_password(password or "", user.password_hash):
            logger.info(f"[AuthService.login] Failed login for username={username!r}")
            raise UnauthorizedError("Invalid username or password.")

        issued = self.token_service.issue(user)
        logger.info(f"[AuthService.login] Issued token for user {user.id}")
        return issued
