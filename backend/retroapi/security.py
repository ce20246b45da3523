"""
Retro Board Backend — Credential Helpers
=========================================

What:  Password hashing/verification and opaque access-token generation.
How:   passlib's CryptContext with the bcrypt scheme (salted, one-way);
       tokens come from the `secrets` CSPRNG and are hex encoded.
Who:   Used only by UserService (signup and signin).
"""

import secrets

from passlib.context import CryptContext

from retroapi.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash; hashing the same password twice yields different output."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a password against a stored hash.

    Returns False for an empty or unrecognized hash instead of raising, so a
    corrupt record reads as a credential mismatch.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def generate_access_token() -> str:
    """Opaque bearer credential: `access_token_bytes` random bytes as lowercase hex."""
    return secrets.token_hex(settings.access_token_bytes)
