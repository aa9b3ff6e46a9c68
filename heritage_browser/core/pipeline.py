from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.predicates import (
    filter_by_category_and_status,
    filter_by_destruction_date,
    filter_by_search,
    filter_by_year_built,
)
from heritage_browser.core.site import Site

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterStage:
    name: str
    apply: Callable[[Sequence[Site], FilterCriteria], List[Site]]


# Cheap set-membership checks first, year parsing and substring search last.
FILTER_STAGES: Tuple[FilterStage, ...] = (
    FilterStage(
        "category_status",
        lambda sites, c: filter_by_category_and_status(sites, c.categories, c.statuses),
    ),
    FilterStage(
        "destruction_date",
        lambda sites, c: filter_by_destruction_date(sites, c.destroyed_from, c.destroyed_to),
    ),
    FilterStage(
        "year_built",
        lambda sites, c: filter_by_year_built(sites, c.built_from, c.built_to),
    ),
    FilterStage(
        "search",
        lambda sites, c: filter_by_search(sites, c.search_term),
    ),
)


@dataclass(frozen=True)
class FilterResult:
    sites: Tuple[Site, ...]
    total: int

    @property
    def count(self) -> int:
        return len(self.sites)


def filter_sites(
    sites: Sequence[Site],
    criteria: FilterCriteria,
    stages: Sequence[FilterStage] = FILTER_STAGES,
) -> FilterResult:
    """
    Run every stage over the sites, feeding each stage the previous output.

    Pure: the input sequence is never mutated, and the result does not depend on
    the order of `stages` (only the cost does).
    """
    current: Sequence[Site] = sites
    for stage in stages:
        current = stage.apply(current, criteria)

    logger.debug(
        "filter_sites",
        extra={"n_total": len(sites), "n_visible": len(current)},
    )
    return FilterResult(sites=tuple(current), total=len(sites))
