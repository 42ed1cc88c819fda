"""User management endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.athlete_analytics.api.dependencies import (
    AdminPrincipal,
    CurrentPrincipal,
    OwnerOrAdmin,
    UserServiceDep,
    require_existing_owner,
)
from src.athlete_analytics.core.security import Principal
from src.athlete_analytics.schemas.common import ApiResponse, PaginationMeta
from src.athlete_analytics.schemas.user import (
    PasswordChange,
    UserCreate,
    UserListData,
    UserListQuery,
    UserRead,
    UserRoleData,
    UserRoleUpdate,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])

PasswordOwner = Annotated[
    Principal, Depends(require_existing_owner("You can only change your own password"))
]


@router.post(
    "",
    response_model=ApiResponse[UserRead],
    status_code=status.HTTP_201_CREATED,
    responses={
        403: {"description": "Admin role required"},
        409: {"description": "Email or tenant unique ID already exists"},
    },
)
async def create_user(
    data: UserCreate, admin: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[UserRead]:
    """Create a user account."""
    user = await service.create_user(data)
    return ApiResponse(data=UserRead.model_validate(user), message="User created successfully")


@router.get("", response_model=ApiResponse[UserListData], responses={403: {"description": "Admin role required"}})
async def list_users(
    query: Annotated[UserListQuery, Query()],
    admin: AdminPrincipal,
    service: UserServiceDep,
) -> ApiResponse[UserListData]:
    """List users with filtering, search and sorting."""
    users, total = await service.list_users(query)
    return ApiResponse(
        data=UserListData(
            users=[UserRead.model_validate(u) for u in users],
            pagination=PaginationMeta.build(query.page, query.limit, total),
        ),
        message="Users retrieved successfully",
    )


@router.get("/by-tenant-unique-id/{tenant_unique_id}", response_model=ApiResponse[UserRead])
async def get_user_by_tenant_unique_id(
    tenant_unique_id: str, principal: CurrentPrincipal, service: UserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.get_by_tenant_unique_id(tenant_unique_id)
    return ApiResponse(data=UserRead.model_validate(user), message="User retrieved successfully")


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserRead],
    responses={403: {"description": "Not the owner"}, 404: {"description": "User not found"}},
)
async def get_user(
    user_id: int, principal: OwnerOrAdmin, service: UserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.get_user(user_id)
    return ApiResponse(data=UserRead.model_validate(user), message="User retrieved successfully")


@router.put(
    "/{user_id}",
    response_model=ApiResponse[UserRead],
    responses={403: {"description": "Not the owner"}, 404: {"description": "User not found"}},
)
async def update_user(
    user_id: int, data: UserUpdate, principal: OwnerOrAdmin, service: UserServiceDep
) -> ApiResponse[UserRead]:
    """Update self-service profile fields."""
    user = await service.update_user(user_id, data)
    return ApiResponse(data=UserRead.model_validate(user), message="User updated successfully")


@router.patch("/{user_id}/role", response_model=ApiResponse[UserRoleData])
async def update_user_role(
    user_id: int, data: UserRoleUpdate, admin: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[UserRoleData]:
    user = await service.update_role(user_id, data.role)
    return ApiResponse(
        data=UserRoleData(id=user.id, role=user.role),  # type: ignore[arg-type]
        message="User role updated successfully",
    )


@router.patch(
    "/{user_id}/password",
    response_model=ApiResponse[None],
    responses={
        400: {"description": "Weak password or wrong current password"},
        403: {"description": "Not the owner"},
    },
)
async def change_password(
    user_id: int, data: PasswordChange, principal: PasswordOwner, service: UserServiceDep
) -> ApiResponse[None]:
    await service.change_password(principal, user_id, data.new_password, data.current_password)
    return ApiResponse(message="Password updated successfully")


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: int, admin: AdminPrincipal, service: UserServiceDep
) -> ApiResponse[None]:
    await service.delete_user(user_id)
    return ApiResponse(message="User deleted successfully")
