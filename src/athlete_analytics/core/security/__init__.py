"""Security utilities - hashing, tokens, password policy and authorization policies.

Re-exports all security-related functions for convenience.
"""

from src.athlete_analytics.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    password_needs_rehash,
    verify_password,
)
from src.athlete_analytics.core.security.policies import (
    ALLOW,
    NOT_A_MEMBER,
    Decision,
    DenyReason,
    MembershipStatus,
    Principal,
    authorize_owner,
    authorize_roles,
    can_act,
    can_view_dashboard,
    effective_active_filter,
)
from src.athlete_analytics.core.security.tokens import (
    NoExpirationClaim,
    TokenClaims,
    TokenDecodeError,
    TokenError,
    TokenExpired,
    TokenMalformed,
    issue_token,
    peek_expiration,
    validate_token,
)
from src.athlete_analytics.core.security.validators import (
    password_strength_errors,
    validate_password_strength,
)

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "hash_password",
    "password_needs_rehash",
    "verify_password",
    # Tokens
    "NoExpirationClaim",
    "TokenClaims",
    "TokenDecodeError",
    "TokenError",
    "TokenExpired",
    "TokenMalformed",
    "issue_token",
    "peek_expiration",
    "validate_token",
    # Policies
    "ALLOW",
    "NOT_A_MEMBER",
    "Decision",
    "DenyReason",
    "MembershipStatus",
    "Principal",
    "authorize_owner",
    "authorize_roles",
    "can_act",
    "can_view_dashboard",
    "effective_active_filter",
    # Validators
    "password_strength_errors",
    "validate_password_strength",
]
