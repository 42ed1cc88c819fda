from fastapi import APIRouter

from src.athlete_analytics.api.v1 import analytics, auth, health, teams, tenants, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(tenants.router)
api_router.include_router(teams.router)
api_router.include_router(analytics.router)
