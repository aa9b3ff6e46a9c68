"""
Filter predicates, one per filter dimension.

Every list form keeps the input order and treats an unset dimension as "no
constraint". Records missing the filtered field (no destruction date,
unparsable construction year) are never excluded.
"""

from __future__ import annotations

from datetime import date
from typing import AbstractSet, List, Optional, Sequence

from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.core.year_parsing import parse_year_built


# -----------------------------------------------------------------------------
# Single-site checks
# -----------------------------------------------------------------------------
def matches_category(site: Site, categories: AbstractSet[SiteCategory]) -> bool:
    return not categories or site.category in categories


def matches_status(site: Site, statuses: AbstractSet[SiteStatus]) -> bool:
    return not statuses or site.status in statuses


def matches_destruction_date(site: Site, start: Optional[date], end: Optional[date]) -> bool:
    destroyed_on = site.destroyed_on
    if destroyed_on is None:
        return True
    if start is not None and destroyed_on < start:
        return False
    if end is not None and destroyed_on > end:
        return False
    return True


def matches_year_built(site: Site, start: Optional[int], end: Optional[int]) -> bool:
    year = parse_year_built(site.year_built)
    if year is None:
        return True
    if start is not None and year < start:
        return False
    if end is not None and year > end:
        return False
    return True


def normalise_search_term(term: Optional[str]) -> str:
    return (term or "").strip().casefold()


def matches_search(site: Site, term: Optional[str]) -> bool:
    needle = normalise_search_term(term)
    if not needle:
        return True
    for text in (site.name, site.name_arabic, site.description):
        if text and needle in text.casefold():
            return True
    return False


# -----------------------------------------------------------------------------
# List forms (pipeline stages)
# -----------------------------------------------------------------------------
def filter_by_category_and_status(
    sites: Sequence[Site],
    categories: AbstractSet[SiteCategory],
    statuses: AbstractSet[SiteStatus],
) -> List[Site]:
    if not categories and not statuses:
        return list(sites)
    return [
        s for s in sites
        if matches_category(s, categories) and matches_status(s, statuses)
    ]


def filter_by_destruction_date(
    sites: Sequence[Site],
    start: Optional[date],
    end: Optional[date],
) -> List[Site]:
    if start is None and end is None:
        return list(sites)
    return [s for s in sites if matches_destruction_date(s, start, end)]


def filter_by_year_built(
    sites: Sequence[Site],
    start: Optional[int],
    end: Optional[int],
) -> List[Site]:
    if start is None and end is None:
        return list(sites)
    return [s for s in sites if matches_year_built(s, start, end)]


def filter_by_search(sites: Sequence[Site], term: Optional[str]) -> List[Site]:
    if not normalise_search_term(term):
        return list(sites)
    return [s for s in sites if matches_search(s, term)]
