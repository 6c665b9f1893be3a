"""
Base schemas and common response models.
"""
from typing import Generic, TypeVar, Optional, List, Any
from pydantic import BaseModel, ConfigDict


# Generic type for paginated responses
T = TypeVar("T")


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class IDSchema(BaseSchema):
    """Schema mixin for integer ID."""

    id: int


class PaginatedResponse(BaseSchema, Generic[T]):
    """Generic paginated response."""

    items: List[T]
    total: int
    page: int
    page_size: int
    pages: int

    @classmethod
    def build(cls, items: List[T], total: int, page: int, page_size: int) -> "PaginatedResponse[T]":
        return cls(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
            pages=(total + page_size - 1) // page_size if total > 0 else 0,
        )


class ErrorResponse(BaseSchema):
    """Error response format, as rendered by the APIException handler."""

    error: str
    message: str
    details: Optional[Any] = None
