"""Authentication gate and static authorizer dependencies."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header

from src.athlete_analytics.api.dependencies.repositories import UserRepo
from src.athlete_analytics.core.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from src.athlete_analytics.core.logging import bind_principal_context
from src.athlete_analytics.core.security import (
    DenyReason,
    Principal,
    TokenError,
    authorize_owner,
    authorize_roles,
    validate_token,
)
from src.athlete_analytics.models import Role

BEARER_PREFIX = "Bearer "


def _extract_bearer(authorization: str | None) -> str:
    if not authorization:
        raise UnauthorizedError("Authorization header is required")
    if not authorization.startswith(BEARER_PREFIX) or not authorization[len(BEARER_PREFIX) :]:
        raise UnauthorizedError("Bearer token is required")
    return authorization[len(BEARER_PREFIX) :]


async def get_current_principal(
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """Validate the bearer token and return the caller's principal.

    The token is the only source of identity: no lookup is made, so a principal
    stays valid until its token expires.
    """
    token = _extract_bearer(authorization)
    try:
        claims = validate_token(token)
    except TokenError as e:
        raise UnauthorizedError(e.message) from e

    principal = Principal(id=claims.principal_id, email=claims.email, role=claims.role)
    bind_principal_context(principal.id, principal.role.value, principal.email)
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


def _raise_for(reason: DenyReason | None, message: str) -> None:
    if reason == DenyReason.UNAUTHENTICATED:
        raise UnauthorizedError("Authentication required")
    raise ForbiddenError(message)


def require_roles(
    *roles: Role, message: str = "Insufficient permissions"
) -> Callable[..., Awaitable[Principal]]:
    """Build a dependency admitting only principals whose global role is in ``roles``.

    Called with no roles it admits any authenticated principal.
    """

    async def dependency(principal: CurrentPrincipal) -> Principal:
        decision = authorize_roles(principal, roles)
        if not decision:
            _raise_for(decision.reason, message)
        return principal

    return dependency


AdminPrincipal = Annotated[Principal, Depends(require_roles(Role.ADMIN))]


def require_owner(
    message: str = "You can only access your own resources",
) -> Callable[..., Awaitable[Principal]]:
    """Build a dependency admitting the owner of the ``user_id`` path parameter or an admin."""

    async def dependency(user_id: int, principal: CurrentPrincipal) -> Principal:
        decision = authorize_owner(principal, user_id)
        if not decision:
            _raise_for(decision.reason, message)
        return principal

    return dependency


def require_existing_owner(
    message: str = "You can only access your own resources",
) -> Callable[..., Awaitable[Principal]]:
    """Like ``require_owner``, but a missing ``user_id`` is a 404 before any ownership check."""
    check_owner = require_owner(message)

    async def dependency(user_id: int, principal: CurrentPrincipal, users: UserRepo) -> Principal:
        if await users.get_by_id(user_id) is None:
            raise NotFoundError("User not found", code="USER_NOT_FOUND")
        return await check_owner(user_id, principal)

    return dependency


OwnerOrAdmin = Annotated[Principal, Depends(require_existing_owner())]
