"""Repository for Tenant entity."""

from sqlalchemy import or_
from sqlmodel import select

from src.athlete_analytics.models import Team, Tenant
from src.athlete_analytics.repositories.base import BaseRepository, contains, ordered

TENANT_SORT_COLUMNS = {
    "id": Tenant.id,
    "name": Tenant.name,
    "city": Tenant.city,
    "state": Tenant.state,
    "country": Tenant.country,
    "is_active": Tenant.is_active,
    "created_at": Tenant.created_at,
    "updated_at": Tenant.updated_at,
}


class TenantRepository(BaseRepository[Tenant]):
    """Repository for Tenant records."""

    model = Tenant

    async def get_by_name(self, name: str) -> Tenant | None:
        result = await self.session.execute(select(Tenant).where(Tenant.name == name))
        return result.scalar_one_or_none()

    async def count_teams(self, tenant_id: int) -> int:
        return await self.count(select(Team).where(Team.tenant_id == tenant_id))

    async def list_tenants(
        self,
        page: int,
        limit: int,
        is_active: bool | None = None,
        city: str | None = None,
        state: str | None = None,
        country: str | None = None,
        search: str | None = None,
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ) -> tuple[list[Tenant], int]:
        """Filtered, sorted page of tenants plus the total match count.

        ``is_active`` must already be resolved by the visibility policy.
        """
        query = select(Tenant)
        if is_active is not None:
            query = query.where(Tenant.is_active == is_active)
        if city:
            query = query.where(contains(Tenant.city, city))
        if state:
            query = query.where(contains(Tenant.state, state))
        if country:
            query = query.where(contains(Tenant.country, country))
        if search:
            query = query.where(
                or_(
                    contains(Tenant.name, search),
                    contains(Tenant.description, search),
                    contains(Tenant.city, search),
                    contains(Tenant.state, search),
                    contains(Tenant.country, search),
                )
            )
        query = ordered(query, TENANT_SORT_COLUMNS[sort_by], sort_order, tiebreak=Tenant.id)
        return await self.paginate(query, page, limit)
