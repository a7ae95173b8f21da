"""
Password hashing.

Thin wrapper around bcrypt: per-record random salt, fixed cost factor.
"""

from typing import Optional

import bcrypt

from profilehub.core.config import settings

# bcrypt only reads this many bytes of the password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def generate_salt(rounds: Optional[int] = None) -> bytes:
    """Generate a bcrypt salt using the configured cost factor."""
    return bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)


def get_password_hash(password: str) -> str:
    """
    Hash a plaintext password.

    Passwords longer than 72 bytes are truncated, as bcrypt itself always did.

    Args:
        password: Plaintext password

    Returns:
        bcrypt hash string ("$2b$<rounds>$...")
    """
    return bcrypt.hashpw(_password_bytes(password), generate_salt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    A malformed stored hash never matches.
    """
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False
