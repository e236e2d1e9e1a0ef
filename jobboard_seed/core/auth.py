"""
Password Utility - bcrypt hashing for demo accounts.

The job-board app verifies logins with bcrypt, so seeded hashes
must be produced with the same scheme.
"""

from typing import Optional
from passlib.context import CryptContext

from jobboard_seed.core.config import get_settings


def get_pwd_context(rounds: Optional[int] = None) -> CryptContext:
    """Build a bcrypt context with the configured cost factor."""
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash password with bcrypt."""
    return get_pwd_context(rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return get_pwd_context().verify(plain_password, hashed_password)
