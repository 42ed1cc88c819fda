from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    field_validator,
)

from src.athlete_analytics.core.security.validators import validate_password_strength
from src.athlete_analytics.models.enums import Role
from src.athlete_analytics.schemas.common import PageParams, PaginationMeta, SortOrder

StrippedName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]
StrippedUniqueId = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]


class UserProfileFields(BaseModel):
    """Self-service profile fields."""

    date_of_birth: date | None = None
    height: float | None = Field(default=None, gt=0, le=300)
    weight: float | None = Field(default=None, gt=0, le=500)
    phone: str | None = Field(default=None, max_length=20)
    emergency_contact_name: str | None = Field(default=None, max_length=200)
    emergency_contact_number: str | None = Field(default=None, max_length=20)

    @field_validator("date_of_birth")
    @classmethod
    def validate_date_of_birth(cls, v: date | None) -> date | None:
        if v is not None and v >= date.today():
            raise ValueError("Date of birth must be in the past")
        return v


class UserCreate(UserProfileFields):
    # Passwords are hashed exactly as sent, so only the identity fields are stripped.
    email: EmailStr
    password: str
    role: Role = Role.ATHLETE
    first_name: StrippedName
    last_name: StrippedName
    tenant_unique_id: StrippedUniqueId

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return validate_password_strength(v)


class UserUpdate(UserProfileFields):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)


class UserRoleUpdate(BaseModel):
    role: Role


class PasswordChange(BaseModel):
    current_password: str | None = Field(default=None, min_length=1)
    new_password: str

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        return validate_password_strength(v)


class UserBrief(BaseModel):
    id: int
    email: str
    role: Role
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}


class UserRead(UserBrief):
    date_of_birth: date | None = None
    age: int | None = None
    height: float | None = None
    weight: float | None = None
    tenant_unique_id: str
    phone: str | None = None
    emergency_contact_name: str | None = None
    emergency_contact_number: str | None = None
    created_at: datetime
    updated_at: datetime


class UserListQuery(PageParams):
    role: Role | None = None
    search: str | None = Field(default=None, max_length=100)
    sort_by: Literal[
        "id", "email", "role", "first_name", "last_name", "created_at", "updated_at"
    ] = "created_at"
    sort_order: SortOrder = "desc"


class UserListData(BaseModel):
    users: list[UserRead]
    pagination: PaginationMeta


class UserRoleData(BaseModel):
    id: int
    role: Role
