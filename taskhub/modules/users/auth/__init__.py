"""
Authentication Module

Provides:
- Password hashing
- Token issuance and verification
- Bearer-token gate for protected routes
"""

from .middleware import get_current_principal, get_token_service
from .passwords import hash_password, verify_password
from .tokens import IssuedToken, Principal, TokenService

__all__ = [
    "get_current_principal",
    "get_token_service",
    "hash_password",
    "verify_password",
    "IssuedToken",
    "Principal",
    "TokenService",
]
