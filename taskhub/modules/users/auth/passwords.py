"""
Password Hashing

Salted one-way hashing via passlib.
"""
import logging
from passlib.context import CryptContext

logger = logging.getLogger("taskhub.users.passwords")

password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    # Users created without a password carry an empty hash and can never log in
    if not hashed:
        return False
    try:
        return password_context.verify(plain, hashed)
    except ValueError as e:
        logger.warning(f"Unrecognized password hash format: {e}")
        return False
