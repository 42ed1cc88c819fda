"""User account model."""

from datetime import date, datetime

from sqlmodel import Field, SQLModel

from src.athlete_analytics.models.base import utc_now
from src.athlete_analytics.models.enums import Role


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    role: str = Field(default=Role.ATHLETE.value, max_length=20, index=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    date_of_birth: date | None = Field(default=None)
    age: int | None = Field(default=None)
    height: float | None = Field(default=None)
    weight: float | None = Field(default=None)
    tenant_unique_id: str = Field(max_length=255, unique=True, index=True)
    phone: str | None = Field(default=None, max_length=20)
    emergency_contact_name: str | None = Field(default=None, max_length=200)
    emergency_contact_number: str | None = Field(default=None, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
