from src.athlete_analytics.schemas.auth import LoginData, LoginRequest
from src.athlete_analytics.schemas.common import ApiResponse, PageParams, PaginationMeta
from src.athlete_analytics.schemas.tenant import TenantCreate, TenantRead, TenantUpdate
from src.athlete_analytics.schemas.user import UserBrief, UserCreate, UserRead, UserUpdate

__all__ = [
    # Common
    "ApiResponse",
    "PageParams",
    "PaginationMeta",
    # Auth
    "LoginData",
    "LoginRequest",
    # Tenant
    "TenantCreate",
    "TenantRead",
    "TenantUpdate",
    # User
    "UserBrief",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
