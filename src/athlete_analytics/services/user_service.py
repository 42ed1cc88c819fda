"""User management service."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.exceptions import (
    AppError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
)
from src.athlete_analytics.core.logging import get_logger
from src.athlete_analytics.core.security import Principal, hash_password, verify_password
from src.athlete_analytics.models import Role, User
from src.athlete_analytics.models.base import age_on, utc_now
from src.athlete_analytics.repositories import (
    TeamMemberRepository,
    TeamRepository,
    UserRepository,
)
from src.athlete_analytics.schemas.user import UserCreate, UserListQuery, UserUpdate

logger = get_logger(__name__)


class UserService:
    """User account management."""

    def __init__(
        self,
        user_repo: UserRepository,
        member_repo: TeamMemberRepository,
        team_repo: TeamRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.member_repo = member_repo
        self.team_repo = team_repo
        self.session = session

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", code="USER_NOT_FOUND")
        return user

    async def get_by_tenant_unique_id(self, tenant_unique_id: str) -> User:
        user = await self.user_repo.get_by_tenant_unique_id(tenant_unique_id)
        if user is None:
            raise NotFoundError("User not found", code="USER_NOT_FOUND")
        return user

    async def list_users(self, query: UserListQuery) -> tuple[list[User], int]:
        return await self.user_repo.list_users(
            page=query.page,
            limit=query.limit,
            role=query.role.value if query.role else None,
            search=query.search,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )

    async def create_user(self, data: UserCreate) -> User:
        try:
            if await self.user_repo.exists_by_email(data.email):
                raise ConflictError("Email already exists", code="EMAIL_EXISTS")
            if await self.user_repo.get_by_tenant_unique_id(data.tenant_unique_id):
                raise ConflictError(
                    "Tenant unique ID already exists", code="TENANT_UNIQUE_ID_EXISTS"
                )

            values = data.model_dump(exclude={"password", "email", "role"})
            user = User(
                **values,
                email=data.email.lower(),
                role=data.role.value,
                hashed_password=hash_password(data.password),
                age=age_on(data.date_of_birth),
            )
            self.user_repo.add(user)
            await self.session.commit()
            await self.session.refresh(user)

            logger.info("User created", user_id=user.id, role=user.role)
            return user
        except AppError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create user", error=str(e))
            raise

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Apply self-service profile fields."""
        user = await self.get_user(user_id)
        update_data = data.model_dump(exclude_unset=True)
        try:
            for field, value in update_data.items():
                setattr(user, field, value)
            if "date_of_birth" in update_data:
                user.age = age_on(user.date_of_birth)
            user.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(user)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User updated", user_id=user.id, fields=sorted(update_data))
        return user

    async def update_role(self, user_id: int, role: Role) -> User:
        user = await self.get_user(user_id)
        previous = user.role
        try:
            user.role = role.value
            user.updated_at = utc_now()
            await self.session.commit()
            await self.session.refresh(user)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User role updated", user_id=user.id, previous_role=previous, role=user.role)
        return user

    async def change_password(
        self,
        principal: Principal,
        user_id: int,
        new_password: str,
        current_password: str | None = None,
    ) -> None:
        """Change a password.

        Admins may reset anyone's password. When a caller changes their own
        password and supplies the current one, it must match.
        """
        user = await self.get_user(user_id)

        if not principal.is_admin and principal.id != user_id:
            raise ForbiddenError("You can only change your own password")

        if (
            principal.id == user_id
            and current_password is not None
            and not verify_password(current_password, user.hashed_password)
        ):
            raise BadRequestError("Current password is incorrect", code="INVALID_PASSWORD")

        try:
            user.hashed_password = hash_password(new_password)
            user.updated_at = utc_now()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Password updated", user_id=user.id, changed_by=principal.id)

    async def delete_user(self, user_id: int) -> None:
        """Delete a user along with their team memberships."""
        user = await self.get_user(user_id)
        try:
            team_ids = await self.member_repo.team_ids_for_user(user_id)
            await self.member_repo.delete_for_user(user_id)
            await self.user_repo.delete(user)
            await self.session.flush()

            for team in await self.team_repo.get_many(team_ids):
                team.total_members = await self.member_repo.count_active(team.id)  # type: ignore[arg-type]
                team.updated_at = utc_now()

            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to delete user", user_id=user_id, error=str(e))
            raise

        logger.info("User deleted", user_id=user_id, memberships_removed=len(team_ids))
