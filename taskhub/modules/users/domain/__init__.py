"""
Domain Models

Pure data models representing user entities.
"""

from .user import User

__all__ = [
    "User",
]
