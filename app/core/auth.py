"""
Authentication Utility - Password handling.

Provides:
- Password hashing with bcrypt
- One-way verification for login

Login hands back a plain profile; there are no tokens or sessions.
"""

from functools import lru_cache
from passlib.context import CryptContext

from app.core.config import get_settings


@lru_cache()
def get_pwd_context() -> CryptContext:
    """bcrypt context with the configured cost factor."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
    )


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return get_pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return get_pwd_context().verify(plain_password, hashed_password)
