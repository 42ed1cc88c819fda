"""Repository for User entity."""

from sqlalchemy import func, or_
from sqlmodel import select

from src.athlete_analytics.models import User
from src.athlete_analytics.repositories.base import BaseRepository, contains, ordered

USER_SORT_COLUMNS = {
    "id": User.id,
    "email": User.email,
    "role": User.role,
    "first_name": User.first_name,
    "last_name": User.last_name,
    "created_at": User.created_at,
    "updated_at": User.updated_at,
}


class UserRepository(BaseRepository[User]):
    """Repository for User accounts."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address (case-insensitive)."""
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def get_by_tenant_unique_id(self, tenant_unique_id: str) -> User | None:
        result = await self.session.execute(
            select(User).where(User.tenant_unique_id == tenant_unique_id)
        )
        return result.scalar_one_or_none()

    async def get_many(self, ids: list[int]) -> list[User]:
        if not ids:
            return []
        result = await self.session.execute(select(User).where(User.id.in_(ids)))  # type: ignore[union-attr]
        return list(result.scalars().all())

    async def list_users(
        self,
        page: int,
        limit: int,
        role: str | None = None,
        search: str | None = None,
        sort_by: str = "created_at",
        sort_order: str = "desc",
    ) -> tuple[list[User], int]:
        """Filtered, sorted page of users plus the total match count."""
        query = select(User)
        if role:
            query = query.where(User.role == role)
        if search:
            query = query.where(
                or_(
                    contains(User.first_name, search),
                    contains(User.last_name, search),
                    contains(User.email, search),
                )
            )
        query = ordered(query, USER_SORT_COLUMNS[sort_by], sort_order, tiebreak=User.id)
        return await self.paginate(query, page, limit)
