# This module previews the query string a listing screen would send for a sequence of user actions.
# It exists so filter schemas and sort mappings can be checked from a terminal without running the console.
# Filters are applied first, then page size, page index, and header clicks, following the screen reset rule.
# The output is the exact form-encoded query string handed to the HTTP collaborator.

from __future__ import annotations

import argparse
import dataclasses
import types
from datetime import date, datetime
from typing import Any, Union, get_args, get_origin, get_type_hints

from library_listing.common.logging import configure_logging
from library_listing.screens.catalog import get_screen


def _coerce(raw: str, annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        candidates = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _coerce(raw, candidates[0])
    if origin is tuple:
        item_type = get_args(annotation)[0]
        return tuple(_coerce(item.strip(), item_type) for item in raw.split(",") if item.strip())
    if annotation is bool:
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "y", "on"}:
            return True
        if normalized in {"0", "false", "no", "n", "off"}:
            return False
        raise ValueError(f"Expected a boolean value (true/false), got: {raw!r}")
    if annotation is int:
        return int(raw)
    if annotation is datetime:
        return datetime.fromisoformat(raw)
    if annotation is date:
        return date.fromisoformat(raw)
    return raw


def parse_filter_overrides(filters_type: type[Any], items: list[str]) -> Any:
    """Build a filter value from `field=value` items, e.g. `category_ids=3,7`."""

    hints = get_type_hints(filters_type)
    field_names = {field.name for field in dataclasses.fields(filters_type)}
    values: dict[str, Any] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"Filter must look like field=value, got: {item!r}")
        name, raw = item.split("=", 1)
        name = name.strip()
        if name not in field_names:
            supported = ", ".join(sorted(field_names))
            raise ValueError(f"Unknown filter '{name}'. Supported filters: {supported}")
        values[name] = _coerce(raw, hints[name])
    return filters_type(**values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview the list query of a library console screen")
    parser.add_argument("--screen", required=True, help="Screen name, e.g. books or authors")
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        help="Filter as field=value; repeat for several filters",
    )
    parser.add_argument("--size", type=int, default=None, help="Page size from the screen options")
    parser.add_argument("--page", type=int, default=None, help="Zero-based page index")
    parser.add_argument(
        "--click",
        dest="clicks",
        action="append",
        default=[],
        help="Sortable column header click; repeat to cycle",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run")
    return parser


def preview_query(
    *,
    screen_name: str,
    filters: list[str],
    page_size: int | None,
    page_index: int | None,
    clicks: list[str],
) -> str:
    screen = get_screen(screen_name)
    state = screen.initial_state()
    state = screen.controller.apply_filters(state, parse_filter_overrides(screen.filters_type, filters))
    if page_size is not None:
        state = screen.change_page_size(state, page_size)
    if page_index is not None:
        state = screen.controller.go_to_page(state, page_index)
    for column in clicks:
        state = screen.controller.toggle_sort(state, column)
    return screen.build_request(state).query_string()


def main() -> None:
    args = build_parser().parse_args()
    configure_logging(level_override=args.log_level)
    print(
        preview_query(
            screen_name=args.screen,
            filters=args.filters,
            page_size=args.size,
            page_index=args.page,
            clicks=args.clicks,
        )
    )


if __name__ == "__main__":
    main()
