# This file combines filters, pagination, and sort into the request descriptor of a listing screen.
# It exists so all screens share one composition order and one page reset rule.
# Filter or page size changes return to the first page; paging and sort changes never reset anything else.
# Every transition returns a complete new state so no request is built against a stale page index.

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from library_listing.common.logging import LISTING_LOGGER_NAME
from library_listing.query.pagination import (
    DEFAULT_PAGE_SIZE,
    PaginationControls,
    pagination_parameters,
)
from library_listing.query.params import ParameterSet, merge
from library_listing.query.sorting import (
    UNSORTED,
    SortFieldMapping,
    SortState,
    next_sort_state,
    sort_parameters,
    to_physical_sort,
)

LOGGER = logging.getLogger(LISTING_LOGGER_NAME)

FiltersT = TypeVar("FiltersT")
FilterEncoder = Callable[[FiltersT], ParameterSet]


@dataclass(frozen=True)
class RequestDescriptor:
    parameters: ParameterSet

    def query_string(self) -> str:
        return self.parameters.to_query_string()


@dataclass(frozen=True)
class ListQueryState(Generic[FiltersT]):
    filters: FiltersT
    pagination: PaginationControls = PaginationControls()
    sort: SortState = UNSORTED


def build_request(
    *,
    filters: FiltersT,
    pagination: PaginationControls,
    sort: SortState,
    mapping: SortFieldMapping,
    encode_filters: FilterEncoder[FiltersT],
) -> RequestDescriptor:
    """Merge filter, pagination, and sort parameters in that order."""

    parameters = merge(
        [
            encode_filters(filters),
            pagination_parameters(pagination),
            sort_parameters(to_physical_sort(sort, mapping)),
        ]
    )
    return RequestDescriptor(parameters=parameters)


def apply_filters(state: ListQueryState[FiltersT], filters: FiltersT) -> ListQueryState[FiltersT]:
    if filters == state.filters:
        return state
    if state.pagination.page_index != 0:
        LOGGER.debug(
            "filters changed; resetting page_index from=%s to=0", state.pagination.page_index
        )
    return replace(state, filters=filters, pagination=state.pagination.first_page())


def change_page_size(state: ListQueryState[FiltersT], page_size: int) -> ListQueryState[FiltersT]:
    if page_size == state.pagination.page_size:
        return state
    return replace(state, pagination=state.pagination.with_page_size(page_size))


def go_to_page(state: ListQueryState[FiltersT], page_index: int) -> ListQueryState[FiltersT]:
    return replace(state, pagination=state.pagination.with_page_index(page_index))


def toggle_sort(state: ListQueryState[FiltersT], column: str) -> ListQueryState[FiltersT]:
    return replace(state, sort=next_sort_state(state.sort, column))


class ListQueryController(Generic[FiltersT]):
    """Binds one screen's filter encoder and sort mapping to the shared query rules."""

    def __init__(
        self,
        *,
        encode_filters: FilterEncoder[FiltersT],
        sort_mapping: SortFieldMapping,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.encode_filters = encode_filters
        self.sort_mapping = sort_mapping
        self.default_page_size = default_page_size

    def initial_state(self, filters: FiltersT) -> ListQueryState[FiltersT]:
        return ListQueryState(
            filters=filters,
            pagination=PaginationControls(page_index=0, page_size=self.default_page_size),
            sort=UNSORTED,
        )

    def build_request(self, state: ListQueryState[FiltersT]) -> RequestDescriptor:
        return build_request(
            filters=state.filters,
            pagination=state.pagination,
            sort=state.sort,
            mapping=self.sort_mapping,
            encode_filters=self.encode_filters,
        )

    def apply_filters(
        self, state: ListQueryState[FiltersT], filters: FiltersT
    ) -> ListQueryState[FiltersT]:
        return apply_filters(state, filters)

    def change_page_size(
        self, state: ListQueryState[FiltersT], page_size: int
    ) -> ListQueryState[FiltersT]:
        return change_page_size(state, page_size)

    def go_to_page(self, state: ListQueryState[FiltersT], page_index: int) -> ListQueryState[FiltersT]:
        return go_to_page(state, page_index)

    def toggle_sort(self, state: ListQueryState[FiltersT], column: str) -> ListQueryState[FiltersT]:
        return toggle_sort(state, column)
