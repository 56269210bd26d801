# This test file validates request composition and the page reset rule of the list query controller.
# It exists so every screen builds the same parameter order and never requests a stale page.
# Filters are plain dataclasses here; the controller only needs equality and an encoder.

from __future__ import annotations

from dataclasses import dataclass

import pytest

from library_listing.query.controller import (
    ListQueryController,
    ListQueryState,
    apply_filters,
    build_request,
    change_page_size,
    go_to_page,
    toggle_sort,
)
from library_listing.query.pagination import PaginationControls
from library_listing.query.params import EMPTY_PARAMETERS, DuplicateParameterKeyError, ParameterSet
from library_listing.query.sorting import UNSORTED, SortDirection, SortFieldMapping, SortState

NAME_MAPPING = SortFieldMapping(columns={"name": ("lastName", "firstName"), "bookCount": ("bookCount",)})


@dataclass(frozen=True)
class SearchFilters:
    search: str = ""


def encode_search(filters: SearchFilters) -> ParameterSet:
    return ParameterSet.of(("search", filters.search)) if filters.search else EMPTY_PARAMETERS


def _controller() -> ListQueryController[SearchFilters]:
    return ListQueryController(encode_filters=encode_search, sort_mapping=NAME_MAPPING)


def test_end_to_end_query_string() -> None:
    request = build_request(
        filters=SearchFilters(search="tolkien"),
        pagination=PaginationControls(page_index=2, page_size=20),
        sort=SortState(column="name", direction=SortDirection.ASC),
        mapping=NAME_MAPPING,
        encode_filters=encode_search,
    )

    assert request.query_string() == "search=tolkien&page=2&size=20&sort=lastName-asc&sort=firstName-asc"


def test_unsorted_request_has_no_sort_key() -> None:
    controller = _controller()

    request = controller.build_request(controller.initial_state(SearchFilters()))

    assert request.query_string() == "page=0&size=20"
    assert request.parameters.get_all("sort") == []


def test_build_request_is_idempotent() -> None:
    controller = _controller()
    state = ListQueryState(
        filters=SearchFilters(search="le guin"),
        pagination=PaginationControls(page_index=1, page_size=50),
        sort=SortState(column="bookCount", direction=SortDirection.DESC),
    )

    first = controller.build_request(state)
    second = controller.build_request(state)

    assert first == second
    assert first.query_string() == second.query_string()


def test_filter_change_resets_page_index_only() -> None:
    state = ListQueryState(
        filters=SearchFilters(search="tolkien"),
        pagination=PaginationControls(page_index=3, page_size=50),
        sort=SortState(column="name", direction=SortDirection.DESC),
    )

    updated = apply_filters(state, SearchFilters(search="tolkien j"))

    assert updated.pagination == PaginationControls(page_index=0, page_size=50)
    assert updated.sort == state.sort
    assert updated.filters == SearchFilters(search="tolkien j")


def test_unchanged_filters_keep_page_index() -> None:
    state = ListQueryState(filters=SearchFilters(search="x"), pagination=PaginationControls(page_index=3))

    assert apply_filters(state, SearchFilters(search="x")) is state


def test_paging_does_not_reset_anything() -> None:
    state = ListQueryState(
        filters=SearchFilters(search="x"),
        pagination=PaginationControls(page_index=3),
        sort=SortState(column="name", direction=SortDirection.ASC),
    )

    updated = go_to_page(state, 4)

    assert updated.pagination.page_index == 4
    assert updated.sort == state.sort
    assert updated.filters == state.filters


def test_page_size_change_resets_page_index() -> None:
    state = ListQueryState(filters=SearchFilters(), pagination=PaginationControls(page_index=3, page_size=20))

    updated = change_page_size(state, 100)

    assert updated.pagination == PaginationControls(page_index=0, page_size=100)


def test_same_page_size_keeps_page_index() -> None:
    state = ListQueryState(filters=SearchFilters(), pagination=PaginationControls(page_index=3, page_size=20))

    updated = change_page_size(state, 20)

    assert updated is state
    assert updated.pagination.page_index == 3


def test_sort_change_keeps_page_index() -> None:
    state = ListQueryState(filters=SearchFilters(), pagination=PaginationControls(page_index=3))

    updated = toggle_sort(state, "name")

    assert updated.pagination.page_index == 3
    assert updated.sort == SortState(column="name", direction=SortDirection.ASC)


def test_filter_change_then_request_uses_first_page() -> None:
    controller = _controller()
    state = controller.go_to_page(controller.initial_state(SearchFilters(search="a")), 3)

    state = controller.apply_filters(state, SearchFilters(search="b"))
    request = controller.build_request(state)

    assert request.parameters.get_all("page") == ["0"]


def test_controller_cycles_sort_through_requests() -> None:
    controller = _controller()
    state = controller.initial_state(SearchFilters())

    queries = []
    for _ in range(3):
        state = controller.toggle_sort(state, "name")
        queries.append(controller.build_request(state).query_string())

    assert queries == [
        "page=0&size=20&sort=lastName-asc&sort=firstName-asc",
        "page=0&size=20&sort=lastName-desc&sort=firstName-desc",
        "page=0&size=20",
    ]
    assert state.sort == UNSORTED


def test_controller_uses_default_page_size() -> None:
    controller = ListQueryController(encode_filters=encode_search, sort_mapping=NAME_MAPPING, default_page_size=50)

    state = controller.change_page_size(controller.initial_state(SearchFilters()), 10)

    assert controller.initial_state(SearchFilters()).pagination.page_size == 50
    assert state.pagination.page_size == 10


def test_filter_key_colliding_with_reserved_key_propagates() -> None:
    def encode_bad(filters: SearchFilters) -> ParameterSet:
        return ParameterSet.of(("sort", filters.search))

    with pytest.raises(DuplicateParameterKeyError) as excinfo:
        build_request(
            filters=SearchFilters(search="title"),
            pagination=PaginationControls(),
            sort=SortState(column="name", direction=SortDirection.ASC),
            mapping=NAME_MAPPING,
            encode_filters=encode_bad,
        )

    assert excinfo.value.key == "sort"
