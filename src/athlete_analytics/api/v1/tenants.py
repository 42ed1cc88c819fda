"""Tenant management endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.athlete_analytics.api.dependencies import (
    AdminPrincipal,
    CurrentPrincipal,
    TenantServiceDep,
)
from src.athlete_analytics.schemas.common import ApiResponse, PaginationMeta
from src.athlete_analytics.schemas.tenant import (
    TenantCreate,
    TenantListData,
    TenantListQuery,
    TenantRead,
    TenantStatusData,
    TenantStatusUpdate,
    TenantUpdate,
)

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post(
    "",
    response_model=ApiResponse[TenantRead],
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {"description": "Admin role required"},
        409: {"description": "Tenant name already exists"},
    },
)
async def create_tenant(
    data: TenantCreate, admin: AdminPrincipal, service: TenantServiceDep
) -> ApiResponse[TenantRead]:
    tenant = await service.create_tenant(data)
    return ApiResponse(data=TenantRead.model_validate(tenant), message="Tenant created successfully")


@router.get("", response_model=ApiResponse[TenantListData])
async def list_tenants(
    query: Annotated[TenantListQuery, Query()],
    principal: CurrentPrincipal,
    service: TenantServiceDep,
) -> ApiResponse[TenantListData]:
    """List tenants. Non-admins see active tenants unless they filter explicitly."""
    tenants, total = await service.list_tenants(query, principal)
    return ApiResponse(
        data=TenantListData(
            tenants=[TenantRead.model_validate(t) for t in tenants],
            pagination=PaginationMeta.build(query.page, query.limit, total),
        ),
        message="Tenants retrieved successfully",
    )


@router.get("/{tenant_id}", response_model=ApiResponse[TenantRead], responses={404: {"description": "Tenant not found"}})
async def get_tenant(
    tenant_id: int, principal: CurrentPrincipal, service: TenantServiceDep
) -> ApiResponse[TenantRead]:
    tenant = await service.get_tenant(tenant_id)
    return ApiResponse(data=TenantRead.model_validate(tenant), message="Tenant retrieved successfully")


@router.put(
    "/{tenant_id}",
    response_model=ApiResponse[TenantRead],
    responses={404: {"description": "Tenant not found"}, 409: {"description": "Tenant name already exists"}},
)
async def update_tenant(
    tenant_id: int, data: TenantUpdate, admin: AdminPrincipal, service: TenantServiceDep
) -> ApiResponse[TenantRead]:
    tenant = await service.update_tenant(tenant_id, data)
    return ApiResponse(data=TenantRead.model_validate(tenant), message="Tenant updated successfully")


@router.patch("/{tenant_id}/status", response_model=ApiResponse[TenantStatusData])
async def update_tenant_status(
    tenant_id: int, data: TenantStatusUpdate, admin: AdminPrincipal, service: TenantServiceDep
) -> ApiResponse[TenantStatusData]:
    tenant = await service.set_status(tenant_id, data.is_active)
    return ApiResponse(
        data=TenantStatusData(id=tenant.id, is_active=tenant.is_active),  # type: ignore[arg-type]
        message="Tenant status updated successfully",
    )


@router.delete(
    "/{tenant_id}",
    response_model=ApiResponse[None],
    responses={404: {"description": "Tenant not found"}, 409: {"description": "Tenant still owns teams"}},
)
async def delete_tenant(
    tenant_id: int, admin: AdminPrincipal, service: TenantServiceDep
) -> ApiResponse[None]:
    await service.delete_tenant(tenant_id)
    return ApiResponse(message="Tenant deleted successfully")
