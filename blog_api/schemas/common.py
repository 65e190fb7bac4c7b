"""
Common schema types used across the API.
"""

from typing import Any, Generic, List, Optional, TypeVar
from pydantic import BaseModel

from blog_api.kernel.results import Page

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    code: Optional[str] = None
    request_id: Optional[str] = None


class SuccessResponse(BaseModel):
    """Standard success response."""

    message: str
    data: Optional[Any] = None


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated list response."""

    items: List[T]
    total: int
    page: int = 1
    page_size: int = 15
    last_page: int = 1
    has_more: bool = False

    @classmethod
    def from_page(cls, page: Page, items: List[T]) -> "PaginatedResponse[T]":
        """Wrap a kernel page; ``items`` are the serialized page items."""
        return cls(
            items=items,
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            last_page=page.last_page,
            has_more=page.has_more,
        )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str
    database: str = "connected"
