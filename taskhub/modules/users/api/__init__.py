"""
REST API Endpoints

Thin API layer that delegates to services.
"""

from .user_endpoints import router as user_router
from .auth_endpoints import router as auth_router

__all__ = [
    "user_router",
    "auth_router",
]
