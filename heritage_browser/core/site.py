from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple


class SiteCategory(Enum):
    """
    Kind of heritage site. Values are the ids used in the data files.
    """
    MOSQUE = "mosque"
    CHURCH = "church"
    ARCHAEOLOGICAL = "archaeological"
    MUSEUM = "museum"
    HISTORIC_BUILDING = "historic-building"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    SiteCategory.MOSQUE: "Mosque",
    SiteCategory.CHURCH: "Church",
    SiteCategory.ARCHAEOLOGICAL: "Archaeological Site",
    SiteCategory.MUSEUM: "Museum",
    SiteCategory.HISTORIC_BUILDING: "Historic Building",
}


@total_ordering
class SiteStatus(Enum):
    """
    Damage status, ordered by severity: damaged < heavily-damaged < destroyed.
    """
    DAMAGED = "damaged"
    HEAVILY_DAMAGED = "heavily-damaged"
    DESTROYED = "destroyed"

    @property
    def severity(self) -> int:
        return _STATUS_SEVERITY[self]

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SiteStatus):
            return NotImplemented
        return self.severity < other.severity


_STATUS_SEVERITY = {
    SiteStatus.DAMAGED: 50,
    SiteStatus.HEAVILY_DAMAGED: 75,
    SiteStatus.DESTROYED: 100,
}


@dataclass(frozen=True)
class Site:
    """
    A single heritage site record, as supplied by the site repository.

    Fields:

    - id: unique identifier across the catalog
    - category / status: closed enums used by the multi-select filters
    - year_built: free-form construction year ("800 BCE", "7th century", "1250")
    - destroyed_on: destruction date, if documented
    - name_arabic: localized name, searched together with name
    - year_built_islamic / destroyed_on_islamic: display-only Hijri strings
    - description / historical_significance: free text, description is searchable
    - coordinates: (lat, lon), carried for the rendering layer only

    Records are never mutated by filtering or sorting.
    """

    id: str
    name: str
    category: SiteCategory
    status: SiteStatus
    year_built: str = ""
    destroyed_on: Optional[date] = None
    name_arabic: Optional[str] = None
    year_built_islamic: Optional[str] = None
    destroyed_on_islamic: Optional[str] = None
    description: str = ""
    historical_significance: str = ""
    coordinates: Optional[Tuple[float, float]] = None
