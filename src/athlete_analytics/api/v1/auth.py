"""Authentication endpoints."""

from fastapi import APIRouter
from starlette.requests import Request

from src.athlete_analytics.api.dependencies import AuthServiceDep, CurrentPrincipal
from src.athlete_analytics.core.config import get_settings
from src.athlete_analytics.core.rate_limit import limiter
from src.athlete_analytics.schemas.auth import LoginData, LoginRequest
from src.athlete_analytics.schemas.common import ApiResponse
from src.athlete_analytics.schemas.user import UserBrief, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=ApiResponse[LoginData],
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "data": {
                            "user": {
                                "id": 1,
                                "email": "admin@athleteanalytics.com",
                                "role": "admin",
                                "first_name": "System",
                                "last_name": "Administrator",
                            },
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "expires_at": "2024-01-16T10:30:00Z",
                        },
                        "message": "Login successful",
                    }
                }
            },
        },
        401: {"description": "Invalid email or password"},
        429: {"description": "Too many login attempts"},
    },
)
@limiter.limit(get_settings().auth_rate_limit)
async def login(
    request: Request, login_data: LoginRequest, service: AuthServiceDep
) -> ApiResponse[LoginData]:
    """Verify credentials and issue a session token."""
    user, token, expires_at = await service.login(login_data.email, login_data.password)
    return ApiResponse(
        data=LoginData(user=UserBrief.model_validate(user), token=token, expires_at=expires_at),
        message="Login successful",
    )


@router.post("/logout", response_model=ApiResponse[None], responses={401: {"description": "Not authenticated"}})
async def logout(principal: CurrentPrincipal) -> ApiResponse[None]:
    """Tokens are not tracked server-side; the client discards its token."""
    return ApiResponse(message="Logout successful")


@router.get(
    "/me",
    response_model=ApiResponse[UserRead],
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Account no longer exists"},
    },
)
async def get_me(principal: CurrentPrincipal, service: AuthServiceDep) -> ApiResponse[UserRead]:
    """Get the profile of the authenticated user."""
    user = await service.get_current_user(principal)
    return ApiResponse(data=UserRead.model_validate(user), message="User profile retrieved successfully")
