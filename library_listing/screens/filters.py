# This file defines the filter values and query encoders of the library listing screens.
# It exists so each screen turns its settled filter inputs into parameters without touching pagination or sort.
# Empty inputs are omitted, multi-select filters become repeated keys, and dates are sent as ISO-8601.
# None of these encoders may emit the reserved `page`, `size`, or `sort` keys.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from library_listing.query.params import EMPTY_PARAMETERS, ParameterSet


def _text(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


class _Encoder:
    """Small builder that skips empty values while preserving key order."""

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def add(self, key: str, value: object | None) -> _Encoder:
        if isinstance(value, str):
            value = _text(value)
        if value is not None:
            self._pairs.append((key, _format(value)))
        return self

    def add_all(self, key: str, values: Iterable[object]) -> _Encoder:
        for value in values:
            self.add(key, value)
        return self

    def build(self) -> ParameterSet:
        if not self._pairs:
            return EMPTY_PARAMETERS
        return ParameterSet(pairs=tuple(self._pairs))


@dataclass(frozen=True)
class BookFilters:
    search: str = ""
    category_ids: tuple[str, ...] = ()
    publisher_ids: tuple[str, ...] = ()
    year_min: int | None = None
    year_max: int | None = None
    available: bool | None = None


def encode_book_filters(filters: BookFilters) -> ParameterSet:
    return (
        _Encoder()
        .add("search", filters.search)
        .add_all("categoryId", filters.category_ids)
        .add_all("publisherId", filters.publisher_ids)
        .add("yearMin", filters.year_min)
        .add("yearMax", filters.year_max)
        .add("available", filters.available)
        .build()
    )


@dataclass(frozen=True)
class AuthorFilters:
    search: str = ""
    country_ids: tuple[str, ...] = ()
    date_of_birth_min: date | None = None
    date_of_birth_max: date | None = None
    book_count_min: int | None = None
    book_count_max: int | None = None


def encode_author_filters(filters: AuthorFilters) -> ParameterSet:
    return (
        _Encoder()
        .add("search", filters.search)
        .add_all("countryId", filters.country_ids)
        .add("dateOfBirthMin", filters.date_of_birth_min)
        .add("dateOfBirthMax", filters.date_of_birth_max)
        .add("bookCountMin", filters.book_count_min)
        .add("bookCountMax", filters.book_count_max)
        .build()
    )


@dataclass(frozen=True)
class BookCountFilters:
    """Filters shared by the publisher and book category screens."""

    search: str = ""
    book_count_min: int | None = None
    book_count_max: int | None = None


def encode_book_count_filters(filters: BookCountFilters) -> ParameterSet:
    return (
        _Encoder()
        .add("search", filters.search)
        .add("bookCountMin", filters.book_count_min)
        .add("bookCountMax", filters.book_count_max)
        .build()
    )


@dataclass(frozen=True)
class UserFilters:
    search: str = ""
    roles: tuple[str, ...] = ()
    registration_date_min: date | None = None
    registration_date_max: date | None = None
    active_loans_min: int | None = None
    active_loans_max: int | None = None


def encode_user_filters(filters: UserFilters) -> ParameterSet:
    return (
        _Encoder()
        .add("search", filters.search)
        .add_all("role", filters.roles)
        .add("registrationDateMin", filters.registration_date_min)
        .add("registrationDateMax", filters.registration_date_max)
        .add("activeBookLoansMin", filters.active_loans_min)
        .add("activeBookLoansMax", filters.active_loans_max)
        .build()
    )


@dataclass(frozen=True)
class AuditEventFilters:
    responsible: str = ""
    resource_id: str = ""
    resource_type: str | None = None
    event_type: str | None = None
    occurred_at_min: datetime | None = None
    occurred_at_max: datetime | None = None


def encode_audit_event_filters(filters: AuditEventFilters) -> ParameterSet:
    return (
        _Encoder()
        .add("responsible", filters.responsible)
        .add("resourceId", filters.resource_id)
        .add("resourceType", filters.resource_type)
        .add("eventType", filters.event_type)
        .add("occurredAtMin", filters.occurred_at_min)
        .add("occurredAtMax", filters.occurred_at_max)
        .build()
    )
