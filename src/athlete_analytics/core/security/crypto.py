"""Password hashing with Argon2id."""

import secrets

import argon2

from src.athlete_analytics.core.config import get_settings


def _create_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with work factors from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()

# Verified against when the account does not exist, so both login paths pay the same cost
DUMMY_PASSWORD_HASH = _password_hasher.hash(secrets.token_urlsafe(16))


def hash_password(password: str) -> str:
    """Hash password using Argon2id."""
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any bad input."""
    if not password or not hashed:
        return False
    try:
        return _password_hasher.verify(hashed, password)
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.VerificationError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def password_needs_rehash(hashed: str) -> bool:
    """True when the stored hash was produced with outdated work factors."""
    try:
        return _password_hasher.check_needs_rehash(hashed)
    except argon2.exceptions.InvalidHashError:
        return False
