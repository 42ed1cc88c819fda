"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, TeamFactory, ...
"""

from tests.factories.base import BaseFactory, unique_suffix, utc_now
from tests.factories.team import (
    TeamActivityFactory,
    TeamFactory,
    TeamGameFactory,
    TeamMemberFactory,
    TeamScheduleFactory,
)
from tests.factories.tenant import TenantFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "unique_suffix",
    "utc_now",
    # Tenant
    "TenantFactory",
    # User
    "UserFactory",
    "DEFAULT_TEST_PASSWORD",
    # Team
    "TeamActivityFactory",
    "TeamFactory",
    "TeamGameFactory",
    "TeamMemberFactory",
    "TeamScheduleFactory",
]
