from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from heritage_browser.core.site import SiteCategory, SiteStatus
from heritage_browser.core.year_parsing import format_year

logger = logging.getLogger(__name__)


def _as_date(value: Optional[date]) -> Optional[date]:
    # datetime is a date subclass; compare calendar days only
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class FilterCriteria:
    """
    Represents one set of filter selections (either the applied or the draft slot).

    Fields:

    - categories: selected site categories, empty = no constraint
    - statuses: selected damage statuses, empty = no constraint
    - destroyed_from / destroyed_to: inclusive destruction-date bounds, None = open
    - built_from / built_to: inclusive construction-year bounds (negative = BCE), None = open
    - search_term: free-text search, matched after trimming

    Set fields are frozensets, so `==` is order-independent. Date bounds are
    calendar days: a `datetime` bound is truncated to its date on construction
    (time of day is dropped), because `Site.destroyed_on` is a date and the
    inclusive range check compares whole days. Two bounds on the same day are
    equal whatever their times.
    """

    categories: FrozenSet[SiteCategory] = field(default_factory=frozenset)
    statuses: FrozenSet[SiteStatus] = field(default_factory=frozenset)
    destroyed_from: Optional[date] = None
    destroyed_to: Optional[date] = None
    built_from: Optional[int] = None
    built_to: Optional[int] = None
    search_term: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", frozenset(self.categories))
        object.__setattr__(self, "statuses", frozenset(self.statuses))
        object.__setattr__(self, "destroyed_from", _as_date(self.destroyed_from))
        object.__setattr__(self, "destroyed_to", _as_date(self.destroyed_to))
        object.__setattr__(self, "search_term", self.search_term or "")

    @classmethod
    def empty(cls) -> FilterCriteria:
        return cls()

    def is_empty(self) -> bool:
        return (
            not self.categories
            and not self.statuses
            and self.destroyed_from is None
            and self.destroyed_to is None
            and self.built_from is None
            and self.built_to is None
            and not self.search_term.strip()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": sorted(c.value for c in self.categories),
            "statuses": sorted(s.value for s in self.statuses),
            "destroyed_from": self.destroyed_from.isoformat() if self.destroyed_from else None,
            "destroyed_to": self.destroyed_to.isoformat() if self.destroyed_to else None,
            "built_from": self.built_from,
            "built_to": self.built_to,
            "search_term": self.search_term,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterCriteria:
        return cls(
            categories=_parse_enum_values(SiteCategory, data.get("categories", [])),
            statuses=_parse_enum_values(SiteStatus, data.get("statuses", [])),
            destroyed_from=_parse_date(data.get("destroyed_from")),
            destroyed_to=_parse_date(data.get("destroyed_to")),
            built_from=_parse_int(data.get("built_from")),
            built_to=_parse_int(data.get("built_to")),
            search_term=str(data.get("search_term") or ""),
        )


def criteria_equal(a: FilterCriteria, b: FilterCriteria) -> bool:
    return a == b


def is_empty(criteria: FilterCriteria) -> bool:
    return criteria.is_empty()


def clear(criteria: FilterCriteria) -> FilterCriteria:
    """Return the canonical empty criteria, whatever the input."""
    return FilterCriteria.empty()


def _parse_enum_values(enum_cls, values: Iterable[Any]) -> FrozenSet:
    parsed = set()
    for raw in values or []:
        try:
            parsed.add(enum_cls(raw))
        except ValueError:
            logger.warning("Dropping unknown %s value %r", enum_cls.__name__, raw)
    return frozenset(parsed)


def _parse_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return _as_date(value)
    # Dash date pickers send "YYYY-MM-DD" or a full ISO timestamp
    return date.fromisoformat(str(value)[:10])


def _parse_int(value: Any) -> Optional[int]:
    if value in (None, ""):
        return None
    return int(value)


# -----------------------------------------------------------------------------
# Active filter chips
# -----------------------------------------------------------------------------
FILTER_KEYS = ("categories", "statuses", "destroyed", "built", "search")


def active_filter_labels(criteria: FilterCriteria) -> List[Tuple[str, str]]:
    """
    Human readable (key, label) pairs for every active dimension, in FILTER_KEYS order.
    The key can be passed to {@link without_filter} to drop that dimension.
    """
    labels: List[Tuple[str, str]] = []

    if criteria.categories:
        names = sorted(c.label for c in criteria.categories)
        labels.append(("categories", "Type: " + ", ".join(names)))

    if criteria.statuses:
        names = [s.label for s in sorted(criteria.statuses)]
        labels.append(("statuses", "Status: " + ", ".join(names)))

    if criteria.destroyed_from is not None or criteria.destroyed_to is not None:
        start = criteria.destroyed_from.isoformat() if criteria.destroyed_from else "…"
        end = criteria.destroyed_to.isoformat() if criteria.destroyed_to else "…"
        labels.append(("destroyed", f"Destroyed: {start} to {end}"))

    if criteria.built_from is not None or criteria.built_to is not None:
        start = format_year(criteria.built_from) if criteria.built_from is not None else "…"
        end = format_year(criteria.built_to) if criteria.built_to is not None else "…"
        labels.append(("built", f"Built: {start} to {end}"))

    if criteria.search_term.strip():
        labels.append(("search", f'Search: "{criteria.search_term.strip()}"'))

    return labels


def without_filter(criteria: FilterCriteria, key: str) -> FilterCriteria:
    """
    Return a copy of criteria with one dimension reset.

    Raises:
        KeyError: if key is not one of FILTER_KEYS
    """
    if key == "categories":
        return replace(criteria, categories=frozenset())
    if key == "statuses":
        return replace(criteria, statuses=frozenset())
    if key == "destroyed":
        return replace(criteria, destroyed_from=None, destroyed_to=None)
    if key == "built":
        return replace(criteria, built_from=None, built_to=None)
    if key == "search":
        return replace(criteria, search_term="")
    raise KeyError(f"Unknown filter key '{key}'")
