from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from heritage_browser.core.site import Site
from heritage_browser.core.year_parsing import parse_year_built


class SortField(Enum):
    NAME = "name"
    CATEGORY = "category"
    STATUS = "status"
    DESTROYED_ON = "destroyed_on"
    DESTROYED_ON_ISLAMIC = "destroyed_on_islamic"
    YEAR_BUILT = "year_built"
    YEAR_BUILT_ISLAMIC = "year_built_islamic"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


def _casefold(value: Optional[str]) -> Optional[str]:
    return value.casefold() if value else None


# Each projection returns a comparable value, or None for "missing" (sorted last).
_PROJECTIONS: Dict[SortField, Callable[[Site], Any]] = {
    SortField.NAME: lambda s: _casefold(s.name),
    SortField.CATEGORY: lambda s: s.category.value,
    SortField.STATUS: lambda s: s.status.severity,
    SortField.DESTROYED_ON: lambda s: s.destroyed_on,
    SortField.DESTROYED_ON_ISLAMIC: lambda s: _casefold(s.destroyed_on_islamic),
    SortField.YEAR_BUILT: lambda s: parse_year_built(s.year_built),
    SortField.YEAR_BUILT_ISLAMIC: lambda s: _casefold(s.year_built_islamic),
}


def sort_key(field: SortField) -> Callable[[Site], Any]:
    """Comparable projection of a site for this column; None means the value is missing."""
    return _PROJECTIONS[field]


def sort_sites(
    sites: Sequence[Site],
    field: SortField,
    direction: SortDirection = SortDirection.ASC,
) -> List[Site]:
    """
    Stable sort by the field's projection. Sites with a missing value keep their
    relative order and always go last, whichever the direction.
    """
    project = sort_key(field)

    present = []
    missing = []
    for site in sites:
        if project(site) is None:
            missing.append(site)
        else:
            present.append(site)

    # reverse=True keeps ties in original order
    present.sort(key=project, reverse=direction is SortDirection.DESC)
    return present + missing


@dataclass(frozen=True)
class SortState:
    field: SortField = SortField.DESTROYED_ON
    direction: SortDirection = SortDirection.DESC

    def select(self, field: SortField) -> SortState:
        """Same field flips the direction; a new field starts ascending."""
        if field is self.field:
            return replace(self, direction=self.direction.flipped())
        return SortState(field=field, direction=SortDirection.ASC)

    def apply(self, sites: Sequence[Site]) -> List[Site]:
        return sort_sites(sites, self.field, self.direction)

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field.value, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SortState:
        default = cls()
        return cls(
            field=SortField(data.get("field", default.field.value)),
            direction=SortDirection(data.get("direction", default.direction.value)),
        )
