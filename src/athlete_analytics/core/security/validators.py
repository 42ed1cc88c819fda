"""Password strength policy, applied at the request-validation boundary."""

from typing import Final

MIN_PASSWORD_LENGTH: Final[int] = 8
MAX_PASSWORD_LENGTH: Final[int] = 128
PASSWORD_SPECIAL_CHARACTERS: Final[frozenset[str]] = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")


def password_strength_errors(password: str) -> list[str]:
    """Return every rule the password breaks, in a stable order."""
    errors: list[str] = []
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    if len(password) > MAX_PASSWORD_LENGTH:
        errors.append(f"Password must be less than {MAX_PASSWORD_LENGTH} characters")
    if not any(c.isupper() for c in password):
        errors.append("Password must contain at least one uppercase letter")
    if not any(c.islower() for c in password):
        errors.append("Password must contain at least one lowercase letter")
    if not any(c.isdigit() for c in password):
        errors.append("Password must contain at least one number")
    if not any(c in PASSWORD_SPECIAL_CHARACTERS for c in password):
        errors.append("Password must contain at least one special character")
    return errors


def validate_password_strength(password: str) -> str:
    """Pydantic-friendly validator: returns the password or raises ValueError."""
    errors = password_strength_errors(password)
    if errors:
        raise ValueError("; ".join(errors))
    return password
