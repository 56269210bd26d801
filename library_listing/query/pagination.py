# This file handles pagination controls and page envelopes for listing screens.
# It exists so every screen encodes `page` and `size` the same way and reads backend pages consistently.
# Page indexes are zero-based on the wire, matching the library backend.
# The display range helper produces the "showing X-Y of Z" numbers shown under each table.

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from library_listing.query.params import ParameterSet

PAGE_PARAM_KEY = "page"
SIZE_PARAM_KEY = "size"
DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class PaginationControls:
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        for name in ("page_index", "page_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got: {value!r}")
        if self.page_index < 0:
            raise ValueError("page_index must be >= 0")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    def with_page_index(self, page_index: int) -> PaginationControls:
        return replace(self, page_index=page_index)

    def with_page_size(self, page_size: int) -> PaginationControls:
        """Change the page size and return to the first page; the same size keeps the page."""

        if page_size == self.page_size:
            return self
        return PaginationControls(page_index=0, page_size=page_size)

    def first_page(self) -> PaginationControls:
        if self.page_index == 0:
            return self
        return replace(self, page_index=0)


def pagination_parameters(controls: PaginationControls) -> ParameterSet:
    """Encode pagination; both keys are always present."""

    return ParameterSet.of(
        (PAGE_PARAM_KEY, controls.page_index),
        (SIZE_PARAM_KEY, controls.page_size),
    )


def compute_total_pages(*, total_count: int, page_size: int) -> int:
    """Compute deterministic total page count."""

    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    if total_count <= 0:
        return 0
    return ((total_count - 1) // page_size) + 1


class PageResponse(BaseModel):
    """Paginated envelope returned by the library backend list endpoints."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: list[Any] = Field(default_factory=list)
    page: int = Field(ge=0)
    size: int = Field(ge=1)
    total_items: int = Field(ge=0, alias="totalItems")
    total_pages: int = Field(ge=0, alias="totalPages")
    has_next: bool = Field(default=False, alias="hasNext")
    has_previous: bool = Field(default=False, alias="hasPrevious")

    @model_validator(mode="after")
    def _check_total_pages(self) -> PageResponse:
        expected = compute_total_pages(total_count=self.total_items, page_size=self.size)
        if self.total_pages != expected:
            raise ValueError(
                f"totalPages {self.total_pages} does not match totalItems {self.total_items} "
                f"at size {self.size} (expected {expected})"
            )
        return self


@dataclass(frozen=True)
class DisplayRange:
    start: int
    end: int
    total: int

    @property
    def as_text(self) -> str:
        return f"{self.start}-{self.end} of {self.total}"


def display_range(response: PageResponse) -> DisplayRange:
    """1-based inclusive item range covered by `response`."""

    if response.total_items == 0:
        return DisplayRange(start=0, end=0, total=0)
    start = response.page * response.size + 1
    end = min((response.page + 1) * response.size, response.total_items)
    return DisplayRange(start=start, end=end, total=response.total_items)
