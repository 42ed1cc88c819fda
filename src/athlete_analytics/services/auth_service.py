"""Authentication service - credential checks and token issuance."""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.athlete_analytics.core.exceptions import NotFoundError, UnauthorizedError
from src.athlete_analytics.core.logging import get_logger
from src.athlete_analytics.core.security import (
    DUMMY_PASSWORD_HASH,
    Principal,
    hash_password,
    issue_token,
    password_needs_rehash,
    peek_expiration,
    verify_password,
)
from src.athlete_analytics.models import User
from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.repositories import UserRepository

logger = get_logger(__name__)


class AuthService:
    """Login and current-user lookups."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials.

        Unknown emails still run a hash verification so both failure paths cost the same.
        """
        user = await self.user_repo.get_by_email(email)
        if user is None:
            verify_password(password, DUMMY_PASSWORD_HASH)
            raise UnauthorizedError("Invalid email or password", code="INVALID_CREDENTIALS")

        if not verify_password(password, user.hashed_password):
            logger.info("Login failed", user_id=user.id)
            raise UnauthorizedError("Invalid email or password", code="INVALID_CREDENTIALS")

        if password_needs_rehash(user.hashed_password):
            try:
                user.hashed_password = hash_password(password)
                user.updated_at = utc_now()
                await self.session.commit()
            except Exception:
                await self.session.rollback()
                raise

        return user

    async def login(self, email: str, password: str) -> tuple[User, str, datetime]:
        """Authenticate and issue a session token.

        Returns (user, token, expires_at).
        """
        user = await self.authenticate(email, password)
        token = issue_token(user.id, user.email, user.role)  # type: ignore[arg-type]
        logger.info("User logged in", user_id=user.id, role=user.role)
        return user, token, peek_expiration(token)

    async def get_current_user(self, principal: Principal) -> User:
        user = await self.user_repo.get_by_id(principal.id)
        if user is None:
            raise NotFoundError("User not found", code="USER_NOT_FOUND")
        return user
