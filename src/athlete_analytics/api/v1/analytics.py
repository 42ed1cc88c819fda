"""Analytics endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.athlete_analytics.api.dependencies import (
    AnalyticsServiceDep,
    require_existing_owner,
    require_roles,
)
from src.athlete_analytics.core.security import Principal
from src.athlete_analytics.models import Role
from src.athlete_analytics.schemas.analytics import TenantTeamsAnalytics, UserTeamsOverview
from src.athlete_analytics.schemas.common import ApiResponse

router = APIRouter(prefix="/analytics", tags=["analytics"])

TeamsOwner = Annotated[
    Principal, Depends(require_existing_owner("You can only view your own teams"))
]
AnalyticsAdmin = Annotated[
    Principal,
    Depends(require_roles(Role.ADMIN, message="Only admins can view tenant analytics")),
]


@router.get(
    "/users/{user_id}/teams",
    response_model=ApiResponse[UserTeamsOverview],
    responses={403: {"description": "Not the owner"}},
)
async def get_user_teams(
    user_id: int, principal: TeamsOwner, service: AnalyticsServiceDep
) -> ApiResponse[UserTeamsOverview]:
    """Active teams of a user with a per-role summary."""
    return ApiResponse(
        data=await service.user_teams(user_id), message="User teams retrieved successfully"
    )


@router.get(
    "/tenants/{tenant_id}/teams/analytics",
    response_model=ApiResponse[TenantTeamsAnalytics],
    responses={403: {"description": "Admin role required"}, 404: {"description": "Tenant not found"}},
)
async def get_tenant_teams_analytics(
    tenant_id: int, admin: AnalyticsAdmin, service: AnalyticsServiceDep
) -> ApiResponse[TenantTeamsAnalytics]:
    return ApiResponse(
        data=await service.tenant_analytics(tenant_id),
        message="Tenant teams analytics retrieved successfully",
    )
