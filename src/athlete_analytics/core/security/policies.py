"""Authorization policies.

Every check here is a pure function returning a ``Decision``. Callers at the
dependency or service seam turn a denial into the matching ``AppError``.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from src.athlete_analytics.models.enums import Role, TeamRole


@dataclass(frozen=True)
class Principal:
    """Identity of the caller for the duration of one request."""

    id: int
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class DenyReason(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    INSUFFICIENT_ROLE = "insufficient_role"
    NOT_OWNER = "not_owner"
    PERMISSION_DENIED = "permission_denied"


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: DenyReason | None = None

    def __bool__(self) -> bool:
        return self.allowed


ALLOW = Decision(allowed=True)


def deny(reason: DenyReason) -> Decision:
    return Decision(allowed=False, reason=reason)


def authorize_roles(principal: Principal | None, allowed_roles: Iterable[Role]) -> Decision:
    """Static role gate. An empty role set admits any authenticated principal."""
    if principal is None:
        return deny(DenyReason.UNAUTHENTICATED)
    roles = frozenset(allowed_roles)
    if roles and principal.role not in roles:
        return deny(DenyReason.INSUFFICIENT_ROLE)
    return ALLOW


def authorize_owner(principal: Principal | None, resource_owner_id: int) -> Decision:
    """Allow the owner of the resource or a global admin."""
    if principal is None:
        return deny(DenyReason.UNAUTHENTICATED)
    if principal.id == resource_owner_id or principal.is_admin:
        return ALLOW
    return deny(DenyReason.NOT_OWNER)


@dataclass(frozen=True)
class MembershipStatus:
    """Result of looking up the caller's active membership on one team."""

    is_member: bool
    role: TeamRole | None = None


NOT_A_MEMBER = MembershipStatus(is_member=False)


def can_act(
    membership: MembershipStatus,
    required_roles: Iterable[TeamRole],
    principal_role: Role,
) -> bool:
    """Admins always pass; otherwise an active membership with a required team role."""
    if principal_role == Role.ADMIN:
        return True
    return membership.is_member and membership.role in frozenset(required_roles)


def can_view_dashboard(membership: MembershipStatus, principal_role: Role) -> bool:
    return principal_role == Role.ADMIN or membership.is_member


def effective_active_filter(requested: bool | None, principal_role: Role) -> bool | None:
    """Resolve the ``is_active`` tenant filter for a list query.

    Admins get exactly what they asked for. Other roles default to active-only;
    an explicit value from a non-admin is passed through unchanged.
    """
    if principal_role == Role.ADMIN:
        return requested
    if requested is None:
        return True
    return requested
