import math
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PagedResult(BaseModel, Generic[T]):
    """One page of results plus count and navigation metadata."""
    items: list[T]
    page_index: int = Field(..., ge=1, description="1-based page number")
    page_size: int = Field(..., ge=1)
    total_count: int = Field(..., ge=0, description="Records matching the filter")
    total_pages: int = Field(..., ge=0)
    has_previous_page: bool
    has_next_page: bool

    @classmethod
    def build(
        cls,
        items: Sequence[T],
        *,
        page_index: int,
        page_size: int,
        total_count: int,
    ) -> "PagedResult[T]":
        total_pages = math.ceil(total_count / page_size)
        return cls(
            items=list(items),
            page_index=page_index,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
            has_previous_page=page_index > 1,
            has_next_page=page_index < total_pages,
        )
