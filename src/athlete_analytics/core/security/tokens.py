"""Session token codec.

Tokens are HS256 JWTs carrying ``userId``, ``email``, ``role``, ``iat`` and ``exp``.
They are never stored server-side; validity is signature plus ``now < exp``.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode

from src.athlete_analytics.core.config import get_settings
from src.athlete_analytics.models.enums import Role


class TokenError(Exception):
    """Base class for token codec failures."""

    message = "Invalid token"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class TokenMalformed(TokenError):
    """Token cannot be parsed, its signature does not verify, or its claims are unusable."""

    message = "Invalid token"


class TokenExpired(TokenError):
    """Token verifies but ``now >= exp``."""

    message = "Token has expired"


class NoExpirationClaim(TokenError):
    message = "Token does not have expiration"


class TokenDecodeError(TokenError):
    message = "Failed to get token expiration"


@dataclass(frozen=True)
class TokenClaims:
    principal_id: int
    email: str
    role: Role
    issued_at: int
    expires_at: int


def _utc(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(UTC)
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now


def issue_token(
    principal_id: int,
    email: str,
    role: Role | str,
    ttl: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    """Sign a token for the principal valid for ``ttl`` (configured default if omitted)."""
    settings = get_settings()
    if ttl is None:
        ttl = timedelta(minutes=settings.access_token_expire_minutes)

    issued_at = int(_utc(now).timestamp())
    expires_at = issued_at + int(ttl.total_seconds())

    to_encode = {
        "userId": principal_id,
        "email": email,
        "role": Role(role).value,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def _claims_from_payload(payload: dict[str, Any]) -> TokenClaims:
    try:
        principal_id = payload["userId"]
        email = payload["email"]
        role = Role(payload["role"])
        issued_at = int(payload["iat"])
        expires_at = payload["exp"]
    except (KeyError, TypeError, ValueError) as e:
        raise TokenMalformed() from e

    if not isinstance(principal_id, int) or isinstance(principal_id, bool):
        raise TokenMalformed()
    if not isinstance(email, str) or not isinstance(expires_at, int | float):
        raise TokenMalformed()

    return TokenClaims(
        principal_id=principal_id,
        email=email,
        role=role,
        issued_at=issued_at,
        expires_at=int(expires_at),
    )


def _require_canonical_signature(token: str) -> None:
    # base64 decoding ignores the spare low bits of the last character, so several
    # encodings map to the same signature bytes. Only the canonical one is accepted.
    signature = token.rpartition(".")[2]
    try:
        raw = base64url_decode(signature.encode("ascii"))
    except (UnicodeEncodeError, ValueError) as e:
        raise TokenMalformed() from e
    if base64url_encode(raw).decode("ascii") != signature:
        raise TokenMalformed()


def validate_token(token: str, now: datetime | None = None) -> TokenClaims:
    """Verify signature and expiry and return the decoded claims.

    Raises:
        TokenMalformed: the token is not a valid signed token for this server.
        TokenExpired: the token verified but ``now >= exp``.
    """
    settings = get_settings()
    _require_canonical_signature(token)
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"verify_exp": False},
        )
    except JWTError as e:
        raise TokenMalformed() from e

    claims = _claims_from_payload(payload)
    if _utc(now).timestamp() >= claims.expires_at:
        raise TokenExpired()
    return claims


def peek_expiration(token: str) -> datetime:
    """Read ``exp`` without verifying the signature."""
    try:
        payload = jwt.get_unverified_claims(token)
    except JWTError as e:
        raise TokenDecodeError() from e

    expires_at = payload.get("exp")
    if expires_at is None:
        raise NoExpirationClaim()
    try:
        return datetime.fromtimestamp(expires_at, tz=UTC)
    except (TypeError, ValueError, OverflowError) as e:
        raise TokenDecodeError() from e
