from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd
from dash import dash_table

from heritage_browser.config.model import COLUMN_LABELS
from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.site import Site

ERA_BCE = "BCE"
ERA_CE = "CE"
ERA_OPTIONS = [{"label": ERA_BCE, "value": ERA_BCE}, {"label": ERA_CE, "value": ERA_CE}]

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def get_filter_dropdown_options(catalog: SiteCatalog) -> Tuple[List[dict], List[dict]]:
    category_options = [{"label": c.label, "value": c.value} for c in catalog.category_options()]
    status_options = [{"label": s.label, "value": s.value} for s in catalog.status_options()]
    return category_options, status_options


# -----------------------------------------------------------------------------
# Year inputs: unsigned magnitude + era select <-> signed year
# -----------------------------------------------------------------------------
def signed_year(magnitude: Any, era: Optional[str]) -> Optional[int]:
    if magnitude in (None, ""):
        return None
    value = abs(int(magnitude))
    return -value if era == ERA_BCE else value


def split_year(year: Optional[int]) -> Tuple[Optional[int], str]:
    if year is None:
        return None, ERA_CE
    return abs(year), ERA_BCE if year < 0 else ERA_CE


def criteria_from_controls(
        categories: Optional[Sequence[str]],
        statuses: Optional[Sequence[str]],
        destroyed_from: Optional[str],
        destroyed_to: Optional[str],
        built_from: Any,
        built_from_era: Optional[str],
        built_to: Any,
        built_to_era: Optional[str],
        search_term: Optional[str],
) -> FilterCriteria:
    """
    Build criteria from raw filter-panel values. Unknown dropdown values are dropped.
    """
    return FilterCriteria.from_dict(
        {
            "categories": list(categories or []),
            "statuses": list(statuses or []),
            "destroyed_from": destroyed_from,
            "destroyed_to": destroyed_to,
            "built_from": signed_year(built_from, built_from_era),
            "built_to": signed_year(built_to, built_to_era),
            "search_term": search_term or "",
        }
    )


def controls_from_criteria(criteria: FilterCriteria) -> Tuple[Any, ...]:
    """Inverse of {@link criteria_from_controls}, in the same argument order."""
    built_from, built_from_era = split_year(criteria.built_from)
    built_to, built_to_era = split_year(criteria.built_to)
    return (
        sorted(c.value for c in criteria.categories),
        sorted(s.value for s in criteria.statuses),
        criteria.destroyed_from.isoformat() if criteria.destroyed_from else None,
        criteria.destroyed_to.isoformat() if criteria.destroyed_to else None,
        built_from,
        built_from_era,
        built_to,
        built_to_era,
        criteria.search_term,
    )


# -----------------------------------------------------------------------------
# Sites table
# -----------------------------------------------------------------------------
def table_columns(column_ids: Sequence[str]) -> List[Dict[str, str]]:
    return [{"name": COLUMN_LABELS[c], "id": c} for c in column_ids]


def sites_frame(sites: Sequence[Site]) -> pd.DataFrame:
    """
    Display values for every table column, one row per site.
    'id' doubles as the DataTable row id.
    """
    return pd.DataFrame(
        {
            "id": [s.id for s in sites],
            "category": [s.category.label for s in sites],
            "name": [s.name for s in sites],
            "status": [s.status.label for s in sites],
            "destroyed_on": [s.destroyed_on.isoformat() if s.destroyed_on else "" for s in sites],
            "destroyed_on_islamic": [s.destroyed_on_islamic or "" for s in sites],
            "year_built": [s.year_built for s in sites],
            "year_built_islamic": [s.year_built_islamic or "" for s in sites],
        },
        columns=["id", *COLUMN_LABELS],
    )


def table_records(sites: Sequence[Site], column_ids: Sequence[str]) -> List[Dict[str, Any]]:
    df = sites_frame(sites)
    return df[["id", *column_ids]].to_dict("records")


def sites_table(table_id: str, page_size: int = 25) -> dash_table.DataTable:
    """
    Styled Dash DataTable for the sites list. Sorting is custom: the sort callback
    owns the order, the table only reports header clicks via sort_by.
    """
    return dash_table.DataTable(
        id=table_id,
        data=[],
        columns=[],

        # ---- FONT + LOOK & FEEL ----
        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "overflow": "hidden",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": _FONT,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        page_size=page_size,
        sort_action="custom",
        sort_mode="single",
        sort_by=[],
        filter_action="none",
    )
