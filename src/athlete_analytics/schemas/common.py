"""Response envelope, pagination and shared field types."""

import math
from datetime import UTC, datetime
from typing import Annotated, Generic, Literal, TypeVar

from pydantic import AfterValidator, BaseModel, Field

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20


def to_naive_utc(value: datetime) -> datetime:
    """Store and compare all timestamps as naive UTC."""
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


NaiveUTCDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope shared by every endpoint."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class PageParams(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class PaginationMeta(BaseModel):
    current_page: int
    per_page: int
    total_pages: int
    total_count: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, per_page: int, total: int) -> "PaginationMeta":
        total_pages = math.ceil(total / per_page) if per_page else 0
        return cls(
            current_page=page,
            per_page=per_page,
            total_pages=total_pages,
            total_count=total,
            has_next=page < total_pages,
            has_prev=page > 1,
        )
