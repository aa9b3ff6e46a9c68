from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple

from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.pipeline import FilterResult, filter_sites
from heritage_browser.core.site import Site, SiteCategory, SiteStatus


@dataclass(frozen=True)
class ValidSets:
    """
    Values actually present in the catalog, for dropdown options and sanitising store data.
    """
    categories: frozenset
    statuses: frozenset
    ids: frozenset


class SiteCatalog:
    """
    Read-only collection of sites used throughout the browser.

    Includes:
    - Lookup by id
    - Cached filtering by FilterCriteria (criteria are hashable values)
    - Cached valid values for UI sanitisation

    The underlying site tuple is never mutated.
    """

    MAX_FILTER_CACHE = 128

    def __init__(self, name: str, sites: Sequence[Site]):
        self.name = name
        self._sites: Tuple[Site, ...] = tuple(sites)
        self._by_id: Dict[str, Site] = {}
        for site in self._sites:
            # first record wins; duplicates are reported by validate_sites
            self._by_id.setdefault(site.id, site)

        self._filter_cache: Dict[FilterCriteria, FilterResult] = {}
        self._valid_sets: Optional[ValidSets] = None

    @property
    def sites(self) -> Tuple[Site, ...]:
        return self._sites

    def __len__(self) -> int:
        return len(self._sites)

    def __iter__(self) -> Iterator[Site]:
        return iter(self._sites)

    def get(self, site_id: str) -> Optional[Site]:
        return self._by_id.get(site_id)

    # -------------------------------------------------------------------------
    # Filtering with caching
    # -------------------------------------------------------------------------
    def filter(self, criteria: FilterCriteria) -> FilterResult:
        cached = self._filter_cache.get(criteria)
        if cached is not None:
            return cached

        result = filter_sites(self._sites, criteria)
        self._filter_cache[criteria] = result

        # Prevent unbounded growth
        if len(self._filter_cache) > self.MAX_FILTER_CACHE:
            self._filter_cache.clear()

        return result

    # -------------------------------------------------------------------------
    # Cached valid values for UI sanitisation
    # -------------------------------------------------------------------------
    def valid_sets(self) -> ValidSets:
        if self._valid_sets is None:
            self._valid_sets = ValidSets(
                categories=frozenset(s.category for s in self._sites),
                statuses=frozenset(s.status for s in self._sites),
                ids=frozenset(self._by_id),
            )
        return self._valid_sets

    def category_options(self) -> Tuple[SiteCategory, ...]:
        present = self.valid_sets().categories
        return tuple(c for c in SiteCategory if c in present)

    def status_options(self) -> Tuple[SiteStatus, ...]:
        present = self.valid_sets().statuses
        return tuple(s for s in sorted(SiteStatus, reverse=True) if s in present)
