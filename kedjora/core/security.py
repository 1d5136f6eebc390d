"""Password hashing and verification for credential login."""

from functools import lru_cache

import bcrypt

# Bcrypt cost for stored hashes. Tests pass a lower value.
BCRYPT_ROUNDS = 12

# Login input limits.
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for the users table."""
    # bcrypt only reads the first 72 bytes.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash compared against when no user matches, so both rejections cost the same."""
    return hash_password("kedjora-unknown-user")
