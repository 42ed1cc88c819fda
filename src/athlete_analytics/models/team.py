"""Team and team-owned models."""

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.models.enums import TeamRole


class Team(SQLModel, table=True):
    __tablename__ = "teams"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    category: str = Field(max_length=100, index=True)
    tenant_id: int = Field(foreign_key="tenants.id", index=True)
    goals: str | None = Field(default=None, max_length=2000)
    total_members: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TeamMember(SQLModel, table=True):
    """Membership of a user on a team, with its team role."""

    __tablename__ = "team_members"
    __table_args__ = (UniqueConstraint("team_id", "user_id", name="uq_team_members_team_user"),)

    id: int | None = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="teams.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    role: str = Field(default=TeamRole.MEMBER.value, max_length=20)
    is_active: bool = Field(default=True)
    joined_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TeamGame(SQLModel, table=True):
    __tablename__ = "team_games"

    id: int | None = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="teams.id", index=True)
    name: str = Field(max_length=255)
    played_on: datetime
    played_against: str = Field(max_length=255)
    result: str = Field(max_length=10)
    description: str | None = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TeamActivity(SQLModel, table=True):
    __tablename__ = "team_activities"

    id: int | None = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="teams.id", index=True)
    name: str = Field(max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class TeamSchedule(SQLModel, table=True):
    __tablename__ = "team_schedules"

    id: int | None = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="teams.id", index=True)
    name: str = Field(max_length=255)
    type: str = Field(max_length=20)
    description: str | None = Field(default=None, max_length=1000)
    scheduled_at: datetime = Field(index=True)
    location: str | None = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
