"""
Token Service

Issues and verifies HS256 bearer tokens. The signing key, issuer and
audience are fixed when the service is built at startup.
"""
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from taskhub.modules.config import Settings
from taskhub.modules.errors import UnauthorizedError
from taskhub.modules.users.domain.user import User

logger = logging.getLogger("taskhub.users.tokens")

ALGORITHM = "HS256"


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires: datetime


@dataclass(frozen=True)
class Principal:
    """Authenticated caller identity extracted from a valid token."""
    user_id: int
    username: str
    email: str


class TokenService:
    """Signs and validates bearer tokens."""

    def __init__(self, settings: Settings):
        self.issuer = settings.jwt_issuer
        self.audience = settings.jwt_audience
        self.lifetime = timedelta(minutes=settings.token_lifetime_minutes)

        if settings.jwt_key:
            self._key = settings.jwt_key.encode("utf-8")
            self.ephemeral_key = False
        else:
            self._key = secrets.token_bytes(32)
            self.ephemeral_key = True
            logger.warning(
                "JWT_KEY is not set. Using a random signing key; "
                "all issued tokens become invalid when the process restarts."
            )

    def issue(self, user: User, now: Optional[datetime] = None) -> IssuedToken:
        """Issue a token for the user, valid for the configured lifetime."""
        issued_at = now or datetime.now(timezone.utc)
        expires = issued_at + self.lifetime
        claims = {
            "sub": str(user.id),
            "username": user.username,
            "email": user.email,
            "iss": self.issuer,
            "aud": self.audience,
            "iat": issued_at,
            "exp": expires,
        }
        token = jwt.encode(claims, self._key, algorithm=ALGORITHM)
        logger.debug(f"[TokenService.issue] user_id={user.id}, expires={expires.isoformat()}")
        return IssuedToken(token=token, expires=expires)

    def verify(self, token: str) -> Principal:
        """
        Validate signature, lifetime, issuer and audience.

        Raises:
            UnauthorizedError: If the token is not acceptable for any reason
        """
        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                audience=self.audience,
                issuer=self.issuer,
            )
        except JWTError as e:
            logger.info(f"Rejected bearer token: {e}")
            raise UnauthorizedError("Invalid or expired token") from e

        try:
            return Principal(
                user_id=int(claims["sub"]),
                username=claims["username"],
                email=claims["email"],
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.info(f"Rejected bearer token with incomplete claims: {e}")
            raise UnauthorizedError("Invalid or expired token") from e
