"""
Business Logic Services

Services contain business logic and orchestrate repository calls.
"""

from .user_service import UserService
from .auth_service import AuthService

__all__ = [
    "UserService",
    "AuthService",
]
