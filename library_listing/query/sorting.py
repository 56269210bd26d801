# This file implements the tri-state column sort cycle used by every listing table.
# It exists so a header click always moves through unsorted, ascending, descending, and back the same way.
# Logical columns are expanded into ordered physical sort fields through a per-screen mapping.
# The `sort` query parameter encoding lives here so the wire format has a single owner.

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from library_listing.common.logging import LISTING_LOGGER_NAME
from library_listing.query.params import ParameterSet

LOGGER = logging.getLogger(LISTING_LOGGER_NAME)

SORT_PARAM_KEY = "sort"
SORT_FIELD_SEPARATOR = "-"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction; both are set or both are None."""

    column: str | None = None
    direction: SortDirection | None = None

    def __post_init__(self) -> None:
        if (self.column is None) != (self.direction is None):
            raise ValueError(
                "SortState column and direction must be set together, "
                f"got column={self.column!r} direction={self.direction!r}"
            )
        if self.direction is not None and not isinstance(self.direction, SortDirection):
            object.__setattr__(self, "direction", SortDirection(self.direction))

    @property
    def is_sorted(self) -> bool:
        return self.column is not None

    def is_active(self, column: str) -> bool:
        return self.column == column

    def direction_for(self, column: str) -> SortDirection | None:
        """Direction a header should display for `column`, None when inactive."""

        return self.direction if self.column == column else None

    @property
    def as_text(self) -> str:
        if self.column is None or self.direction is None:
            return "unsorted"
        return f"{self.column}:{self.direction.value}"


UNSORTED = SortState()


@dataclass(frozen=True)
class SortField:
    field: str
    direction: SortDirection

    @property
    def as_param(self) -> str:
        return f"{self.field}{SORT_FIELD_SEPARATOR}{self.direction.value}"


@dataclass(frozen=True)
class SortFieldMapping:
    """Logical column id to ordered physical sort fields."""

    columns: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        normalized: dict[str, tuple[str, ...]] = {}
        for column, fields in self.columns.items():
            if isinstance(fields, str):
                fields = (fields,)
            field_tuple = tuple(str(field) for field in fields)
            if not field_tuple:
                raise ValueError(f"Sort column {column!r} must map to at least one field")
            normalized[str(column)] = field_tuple
        object.__setattr__(self, "columns", normalized)

    @property
    def column_ids(self) -> list[str]:
        return list(self.columns)

    def __contains__(self, column: object) -> bool:
        return column in self.columns

    def fields_for(self, column: str) -> tuple[str, ...]:
        return self.columns.get(column, ())


def next_sort_state(current: SortState, clicked_column: str) -> SortState:
    """Advance the sort state after a click on `clicked_column`."""

    if current.column != clicked_column:
        return SortState(column=clicked_column, direction=SortDirection.ASC)
    if current.direction is SortDirection.ASC:
        return SortState(column=clicked_column, direction=SortDirection.DESC)
    if current.direction is SortDirection.DESC:
        return UNSORTED
    return SortState(column=clicked_column, direction=SortDirection.ASC)


def to_physical_sort(state: SortState, mapping: SortFieldMapping) -> tuple[SortField, ...]:
    """Expand the active column into its physical sort fields, empty when unsorted."""

    if state.column is None or state.direction is None:
        return ()

    fields = mapping.fields_for(state.column)
    if not fields:
        LOGGER.warning("sort column has no field mapping column=%s; sending no sort", state.column)
        return ()
    return tuple(SortField(field=field, direction=state.direction) for field in fields)


def sort_parameters(fields: Iterable[SortField]) -> ParameterSet:
    return ParameterSet(pairs=tuple((SORT_PARAM_KEY, field.as_param) for field in fields))
