# This file wires each listing screen to the shared list query controller.
# It exists so a screen is described by data (encoder, filter type, YAML config) instead of copied logic.
# Every screen gets the same reset rule, sort cycle, and parameter order.
# Page size choices are validated here because the allowed options are screen specific.

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic

from library_listing.common.logging import LISTING_LOGGER_NAME
from library_listing.common.settings import get_settings
from library_listing.query.controller import (
    FiltersT,
    ListQueryController,
    ListQueryState,
    RequestDescriptor,
)
from library_listing.query.params import ParameterSet
from library_listing.screens.filters import (
    AuditEventFilters,
    AuthorFilters,
    BookCountFilters,
    BookFilters,
    UserFilters,
    encode_audit_event_filters,
    encode_author_filters,
    encode_book_count_filters,
    encode_book_filters,
    encode_user_filters,
)
from library_listing.screens.screen_config import ScreenConfig, load_screen_configs

LOGGER = logging.getLogger(LISTING_LOGGER_NAME)

# Screen name -> (filter value type, filter encoder).
FILTER_SCHEMAS: dict[str, tuple[type[Any], Callable[[Any], ParameterSet]]] = {
    "books": (BookFilters, encode_book_filters),
    "authors": (AuthorFilters, encode_author_filters),
    "publishers": (BookCountFilters, encode_book_count_filters),
    "book_categories": (BookCountFilters, encode_book_count_filters),
    "users": (UserFilters, encode_user_filters),
    "audit": (AuditEventFilters, encode_audit_event_filters),
}


@dataclass(frozen=True)
class ListingScreen(Generic[FiltersT]):
    name: str
    filters_type: type[FiltersT]
    controller: ListQueryController[FiltersT]
    page_size_options: tuple[int, ...]

    @property
    def sortable_columns(self) -> list[str]:
        return self.controller.sort_mapping.column_ids

    def initial_state(self) -> ListQueryState[FiltersT]:
        return self.controller.initial_state(self.filters_type())

    def change_page_size(self, state: ListQueryState[FiltersT], page_size: int) -> ListQueryState[FiltersT]:
        if page_size not in self.page_size_options:
            raise ValueError(
                f"Unsupported page size {page_size} for screen '{self.name}'. "
                f"Supported sizes: {', '.join(str(size) for size in self.page_size_options)}"
            )
        return self.controller.change_page_size(state, page_size)

    def build_request(self, state: ListQueryState[FiltersT]) -> RequestDescriptor:
        return self.controller.build_request(state)


def build_screen(name: str, config: ScreenConfig) -> ListingScreen[Any]:
    if name not in FILTER_SCHEMAS:
        supported = ", ".join(sorted(FILTER_SCHEMAS))
        raise ValueError(f"No filter schema for screen '{name}'. Supported screens: {supported}")
    filters_type, encoder = FILTER_SCHEMAS[name]
    controller: ListQueryController[Any] = ListQueryController(
        encode_filters=encoder,
        sort_mapping=config.sort_mapping(),
        default_page_size=config.default_page_size,
    )
    return ListingScreen(
        name=name,
        filters_type=filters_type,
        controller=controller,
        page_size_options=tuple(config.page_size_options),
    )


def build_screens(configs: dict[str, ScreenConfig]) -> dict[str, ListingScreen[Any]]:
    screens = {name: build_screen(name, config) for name, config in configs.items()}
    LOGGER.info("listing screens loaded count=%s names=%s", len(screens), ",".join(sorted(screens)))
    return screens


@lru_cache(maxsize=1)
def get_screens() -> dict[str, ListingScreen[Any]]:
    """Cached registry built from the configured screen file."""

    settings = get_settings()
    return build_screens(load_screen_configs(settings.LISTING_SCREENS_PATH))


def get_screen(name: str) -> ListingScreen[Any]:
    screens = get_screens()
    if name not in screens:
        supported = ", ".join(sorted(screens))
        raise ValueError(f"Unknown screen '{name}'. Supported screens: {supported}")
    return screens[name]
