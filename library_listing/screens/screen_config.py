# This file loads the listing screen definitions from YAML.
# It exists so sort mappings and page size options can change without touching screen code.
# The loader validates every screen with pydantic before any controller is built from it.
# Keeping these values in one file avoids drift between screens that share columns.

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from library_listing.query.sorting import SortFieldMapping


class ScreenConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_page_size: int = Field(ge=1)
    page_size_options: list[int] = Field(min_length=1)
    sort_columns: dict[str, list[str]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_page_sizes(self) -> ScreenConfig:
        if any(size < 1 for size in self.page_size_options):
            raise ValueError("page_size_options must all be >= 1")
        if self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size {self.default_page_size} is not one of {self.page_size_options}"
            )
        empty = sorted(column for column, fields in self.sort_columns.items() if not fields)
        if empty:
            raise ValueError(f"sort columns without fields: {empty}")
        return self

    def sort_mapping(self) -> SortFieldMapping:
        return SortFieldMapping(
            columns={column: tuple(fields) for column, fields in self.sort_columns.items()}
        )


def _load_yaml(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def parse_screen_configs(raw: dict[str, Any], *, source: str = "<memory>") -> dict[str, ScreenConfig]:
    screens = raw.get("screens")
    if not isinstance(screens, dict) or not screens:
        raise ValueError(f"Screen config {source} must define a non-empty `screens` mapping")

    parsed: dict[str, ScreenConfig] = {}
    for name, payload in screens.items():
        try:
            parsed[str(name)] = ScreenConfig.model_validate(payload)
        except ValidationError as exc:
            raise ValueError(f"Invalid screen config {name!r} in {source}: {exc}") from exc
    return parsed


def load_screen_configs(path: str) -> dict[str, ScreenConfig]:
    return parse_screen_configs(_load_yaml(path), source=path)
