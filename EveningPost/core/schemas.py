from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Wire shape shared by every payload: camelCase JSON, snake_case in Python."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserCreate(BaseSchema):
    username: str
    password: str


class CategoryCreate(BaseSchema):
    name: str = Field(..., max_length=50)
    slug: str = Field(..., max_length=50)


class CategoryRead(BaseSchema):
    id: int
    name: str
    slug: str


class ArticleCreate(BaseSchema):
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    category_id: int
    author: str = Field(..., max_length=100)
    published_at: datetime
    is_featured: Optional[int] = 0

    @field_validator("published_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class ArticleRead(BaseSchema):
    id: int
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    category_id: int
    author: str
    published_at: datetime
    is_featured: Optional[int] = 0


class HealthResponse(BaseSchema):
    status: str
    service: str
    version: str


class ErrorResponse(BaseSchema):
    message: str
