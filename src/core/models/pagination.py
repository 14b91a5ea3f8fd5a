"""Pagination model."""

from typing import Literal

from pydantic import BaseModel, Field, StrictInt


class PageWindow(BaseModel):
    """Resolved pagination parameters for one view.

    Every value here is already clamped; callers slice with
    ``items[start:end]`` and report ``page`` and ``total_pages`` back.
    """

    page: StrictInt = Field(..., ge=1, description="Clamped page number (1-based)")
    per_page: StrictInt | Literal["all"] = Field(
        ...,
        description="Requested page size, or 'all'",
    )
    page_size: StrictInt = Field(..., ge=1, description="Effective page size")
    total_items: StrictInt = Field(..., ge=0, description="Items before pagination")
    total_pages: StrictInt = Field(..., ge=1, description="Number of pages, at least 1")

    @property
    def start(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def end(self) -> int:
        return self.page * self.page_size
