"""Tenant factory for test data generation."""

from polyfactory import Use

from src.athlete_analytics.models import Tenant
from tests.factories.base import BaseFactory, unique_suffix, utc_now


class TenantFactory(BaseFactory):
    """Factory for generating Tenant test data."""

    __model__ = Tenant

    id = None
    name = Use(lambda: f"Test Tenant {unique_suffix()}")
    city = "Springfield"
    state = "Illinois"
    country = "USA"
    description = None
    is_active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def inactive(cls, **kwargs):
        """Create a deactivated tenant."""
        return cls.build(is_active=False, **kwargs)
