from __future__ import annotations

from typing import Sequence

import pandas as pd

from heritage_browser.core.site import Site, SiteStatus


def status_counts(sites: Sequence[Site]) -> pd.DataFrame:
    """
    Number of sites per status, most severe first. Statuses with no sites are kept with 0.
    Columns: status, label, count
    """
    ordered = sorted(SiteStatus, reverse=True)
    counts = pd.Series([s.status.value for s in sites], dtype="object").value_counts()

    return pd.DataFrame(
        {
            "status": [s.value for s in ordered],
            "label": [s.label for s in ordered],
            "count": [int(counts.get(s.value, 0)) for s in ordered],
        }
    )


def monthly_destruction_counts(sites: Sequence[Site]) -> pd.DataFrame:
    """
    Sites destroyed per calendar month, for the timeline view.
    Sites without a destruction date are left out. Columns: month (Timestamp), count
    """
    dates = [s.destroyed_on for s in sites if s.destroyed_on is not None]
    if not dates:
        return pd.DataFrame({"month": pd.Series(dtype="datetime64[ns]"), "count": pd.Series(dtype="int64")})

    months = pd.to_datetime(pd.Series(dates)).dt.to_period("M").dt.to_timestamp()
    counts = months.value_counts().sort_index()
    return pd.DataFrame({"month": counts.index, "count": counts.values.astype("int64")})
