"""Tenant management service."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.exceptions import AppError, ConflictError, NotFoundError
from src.athlete_analytics.core.logging import get_logger
from src.athlete_analytics.core.security import Principal, effective_active_filter
from src.athlete_analytics.models import Tenant
from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.repositories import TenantRepository
from src.athlete_analytics.schemas.tenant import TenantCreate, TenantListQuery, TenantUpdate

logger = get_logger(__name__)


class TenantService:
    """Tenant (organization) management."""

    def __init__(self, tenant_repo: TenantRepository, session: AsyncSession):
        self.tenant_repo = tenant_repo
        self.session = session

    async def get_tenant(self, tenant_id: int) -> Tenant:
        tenant = await self.tenant_repo.get_by_id(tenant_id)
        if tenant is None:
            raise NotFoundError("Tenant not found", code="TENANT_NOT_FOUND")
        return tenant

    async def list_tenants(
        self, query: TenantListQuery, principal: Principal
    ) -> tuple[list[Tenant], int]:
        is_active = effective_active_filter(query.is_active, principal.role)
        if is_active is False and not principal.is_admin:
            # Explicit request for inactive tenants by a non-admin is passed through
            logger.warning("Non-admin listed inactive tenants", user_id=principal.id)
        return await self.tenant_repo.list_tenants(
            page=query.page,
            limit=query.limit,
            is_active=is_active,
            city=query.city,
            state=query.state,
            country=query.country,
            search=query.search,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )

    async def _ensure_name_available(self, name: str, exclude_id: int | None = None) -> None:
        existing = await self.tenant_repo.get_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Tenant name already exists", code="TENANT_NAME_EXISTS")

    async def create_tenant(self, data: TenantCreate) -> Tenant:
        try:
            await self._ensure_name_available(data.name)
            tenant = Tenant(**data.model_dump())
            self.tenant_repo.add(tenant)
            await self.session.commit()
            await self.session.refresh(tenant)
        except AppError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create tenant", error=str(e))
            raise

        logger.info("Tenant created", tenant_id=tenant.id, name=tenant.name)
        return tenant

    async def update_tenant(self, tenant_id: int, data: TenantUpdate) -> Tenant:
        tenant = await self.get_tenant(tenant_id)
        update_data = data.model_dump(exclude_unset=True)
        try:
            if update_data.get("name") and update_data["name"] != tenant.name:
                await self._ensure_name_available(update_data["name"], exclude_id=tenant.id)
            for field, value in update_data.items():
                setattr(tenant, field, value)
            tenant.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(tenant)
        except AppError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to update tenant", tenant_id=tenant_id, error=str(e))
            raise

        logger.info("Tenant updated", tenant_id=tenant.id, fields=sorted(update_data))
        return tenant

    async def set_status(self, tenant_id: int, is_active: bool) -> Tenant:
        tenant = await self.get_tenant(tenant_id)
        try:
            tenant.is_active = is_active
            tenant.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(tenant)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Tenant status updated", tenant_id=tenant.id, is_active=is_active)
        return tenant

    async def delete_tenant(self, tenant_id: int) -> None:
        """Delete a tenant that no longer owns any team."""
        tenant = await self.get_tenant(tenant_id)
        teams = await self.tenant_repo.count_teams(tenant_id)
        if teams:
            raise ConflictError(
                "Tenant still has teams; delete them first",
                code="TENANT_HAS_TEAMS",
                details={"teams_count": teams},
            )
        try:
            await self.tenant_repo.delete(tenant)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Tenant deleted", tenant_id=tenant_id)
