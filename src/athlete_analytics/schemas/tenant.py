from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.athlete_analytics.schemas.common import PageParams, PaginationMeta, SortOrder


class TenantCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    country: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    is_active: bool = True


class TenantUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    state: str | None = Field(default=None, min_length=1, max_length=100)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    is_active: bool | None = None


class TenantStatusUpdate(BaseModel):
    is_active: bool


class TenantRead(BaseModel):
    id: int
    name: str
    city: str
    state: str
    country: str
    description: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TenantListQuery(PageParams):
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)
    is_active: bool | None = None
    search: str | None = Field(default=None, max_length=255)
    sort_by: Literal[
        "id", "name", "city", "state", "country", "is_active", "created_at", "updated_at"
    ] = "created_at"
    sort_order: SortOrder = "desc"


class TenantListData(BaseModel):
    tenants: list[TenantRead]
    pagination: PaginationMeta


class TenantStatusData(BaseModel):
    id: int
    is_active: bool
