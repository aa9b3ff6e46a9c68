"""
Typed update operations for FilterCriteria.

Each filter control produces one of these, and `apply_update` replaces exactly
one field. Set-valued updates replace the whole selection (no merging).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Union

from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.site import SiteCategory, SiteStatus


@dataclass(frozen=True)
class SetCategories:
    values: FrozenSet[SiteCategory]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", frozenset(self.values))


@dataclass(frozen=True)
class SetStatuses:
    values: FrozenSet[SiteStatus]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", frozenset(self.values))


@dataclass(frozen=True)
class SetDestroyedFrom:
    value: Optional[date]


@dataclass(frozen=True)
class SetDestroyedTo:
    value: Optional[date]


@dataclass(frozen=True)
class SetBuiltFrom:
    value: Optional[int]


@dataclass(frozen=True)
class SetBuiltTo:
    value: Optional[int]


@dataclass(frozen=True)
class SetSearchTerm:
    value: str


FilterUpdate = Union[
    SetCategories,
    SetStatuses,
    SetDestroyedFrom,
    SetDestroyedTo,
    SetBuiltFrom,
    SetBuiltTo,
    SetSearchTerm,
]

_UPDATE_BY_FIELD = {
    "categories": SetCategories,
    "statuses": SetStatuses,
    "destroyed_from": SetDestroyedFrom,
    "destroyed_to": SetDestroyedTo,
    "built_from": SetBuiltFrom,
    "built_to": SetBuiltTo,
    "search_term": SetSearchTerm,
}


def apply_update(criteria: FilterCriteria, update: FilterUpdate) -> FilterCriteria:
    if isinstance(update, SetCategories):
        return replace(criteria, categories=update.values)
    if isinstance(update, SetStatuses):
        return replace(criteria, statuses=update.values)
    if isinstance(update, SetDestroyedFrom):
        return replace(criteria, destroyed_from=update.value)
    if isinstance(update, SetDestroyedTo):
        return replace(criteria, destroyed_to=update.value)
    if isinstance(update, SetBuiltFrom):
        return replace(criteria, built_from=update.value)
    if isinstance(update, SetBuiltTo):
        return replace(criteria, built_to=update.value)
    if isinstance(update, SetSearchTerm):
        return replace(criteria, search_term=update.value)
    raise TypeError(f"Unsupported filter update: {update!r}")


def apply_updates(criteria: FilterCriteria, updates: Iterable[FilterUpdate]) -> FilterCriteria:
    for update in updates:
        criteria = apply_update(criteria, update)
    return criteria


def updates_from_fields(fields: Dict[str, Any]) -> List[FilterUpdate]:
    """
    Convert keyword-style partial criteria ({"search_term": "mosque"}) into updates.

    Raises:
        TypeError: if a key is not a FilterCriteria field
    """
    updates: List[FilterUpdate] = []
    for name, value in fields.items():
        try:
            update_cls = _UPDATE_BY_FIELD[name]
        except KeyError:
            raise TypeError(f"Unknown filter field '{name}'") from None
        updates.append(update_cls(value))
    return updates


def updates_to(target: FilterCriteria) -> List[FilterUpdate]:
    """Updates that turn any criteria into `target`, one per field."""
    return updates_from_fields({name: getattr(target, name) for name in _UPDATE_BY_FIELD})
