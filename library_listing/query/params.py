# This file composes independent query parameter sets into one ordered request parameter list.
# It exists so filters, pagination, and sort can each encode their own keys without knowing about the others.
# Repeated keys are allowed inside one set (multi-select filters) but a key shared by two sets is a schema conflict.
# The conflict is raised instead of resolved so naming collisions surface while a screen is being built.

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode


class DuplicateParameterKeyError(ValueError):
    """Raised when the same key is defined by more than one parameter set."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Duplicate parameter key across different parameter sets: {key!r}")


@dataclass(frozen=True)
class ParameterSet:
    """Immutable ordered sequence of (key, value) string pairs."""

    pairs: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        normalized: list[tuple[str, str]] = []
        for key, value in self.pairs:
            if not isinstance(key, str) or not key:
                raise ValueError(f"Parameter keys must be non-empty strings, got: {key!r}")
            if value is None:
                raise ValueError(f"Parameter {key!r} has no value; omit the key instead of sending None")
            normalized.append((key, str(value)))
        object.__setattr__(self, "pairs", tuple(normalized))

    @classmethod
    def of(cls, *pairs: tuple[str, object]) -> ParameterSet:
        return cls(pairs=tuple(pairs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> ParameterSet:
        """Build a set from a mapping; list and tuple values become repeated keys, None values are skipped."""

        pairs: list[tuple[str, object]] = []
        for key, value in mapping.items():
            if isinstance(value, (list, tuple)):
                pairs.extend((key, item) for item in value if item is not None)
            elif value is not None:
                pairs.append((key, value))
        return cls(pairs=tuple(pairs))

    def append(self, key: str, value: object) -> ParameterSet:
        return ParameterSet(pairs=(*self.pairs, (key, value)))

    def extend(self, key: str, values: Iterable[object]) -> ParameterSet:
        return ParameterSet(pairs=(*self.pairs, *((key, value) for value in values)))

    def keys(self) -> list[str]:
        """Distinct keys in first-seen order."""

        return list(dict.fromkeys(key for key, _ in self.pairs))

    def get_all(self, key: str) -> list[str]:
        return [value for candidate, value in self.pairs if candidate == key]

    def to_query_string(self) -> str:
        return urlencode(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


EMPTY_PARAMETERS = ParameterSet()


def merge(sets: Sequence[ParameterSet]) -> ParameterSet:
    """Concatenate parameter sets in order, rejecting keys shared across sets."""

    seen_keys: set[str] = set()
    merged: list[tuple[str, str]] = []
    for parameter_set in sets:
        set_keys = parameter_set.keys()
        for key in set_keys:
            if key in seen_keys:
                raise DuplicateParameterKeyError(key)
        seen_keys.update(set_keys)
        merged.extend(parameter_set.pairs)
    return ParameterSet(pairs=tuple(merged))
