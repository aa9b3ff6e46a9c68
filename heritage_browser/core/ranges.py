from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from heritage_browser.core.site import Site
from heritage_browser.core.year_parsing import parse_year_built

# Used when no site has a documented destruction date
FALLBACK_RANGE_START = date(2023, 10, 7)


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date


@dataclass(frozen=True)
class YearRange:
    """
    Display defaults for the year-range inputs: magnitudes plus era labels.
    start/end are None when no site has a parsable construction year.
    """
    start: Optional[int]
    end: Optional[int]

    @property
    def start_era(self) -> str:
        return "BCE" if self.start is not None and self.start < 0 else "CE"

    @property
    def end_era(self) -> str:
        return "BCE" if self.end is not None and self.end < 0 else "CE"


def default_date_range(sites: Sequence[Site], today: Optional[date] = None) -> DateRange:
    dates = [s.destroyed_on for s in sites if s.destroyed_on is not None]
    if not dates:
        return DateRange(start=FALLBACK_RANGE_START, end=today or date.today())
    return DateRange(start=min(dates), end=max(dates))


def default_year_range(sites: Sequence[Site]) -> YearRange:
    years = [y for y in (parse_year_built(s.year_built) for s in sites) if y is not None]
    if not years:
        return YearRange(start=None, end=None)
    return YearRange(start=min(years), end=max(years))
