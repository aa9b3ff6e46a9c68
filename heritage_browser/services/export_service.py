from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

import pandas as pd

from heritage_browser.core.site import Site

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportColumn:
    id: str
    label: str
    get_value: Callable[[Site], Any]
    default_included: bool = True


def _coordinates(site: Site) -> Optional[str]:
    if site.coordinates is None:
        return None
    lat, lon = site.coordinates
    return f"{lat}, {lon}"


EXPORT_COLUMNS: Dict[str, ExportColumn] = {
    c.id: c
    for c in (
        ExportColumn("name", "Name", lambda s: s.name),
        ExportColumn("name_arabic", "Name (Arabic)", lambda s: s.name_arabic),
        ExportColumn("category", "Type", lambda s: s.category.value),
        ExportColumn("status", "Status", lambda s: s.status.value),
        ExportColumn("year_built", "Year Built", lambda s: s.year_built),
        ExportColumn("year_built_islamic", "Year Built (Islamic)", lambda s: s.year_built_islamic, False),
        ExportColumn(
            "destroyed_on",
            "Destruction Date",
            lambda s: s.destroyed_on.isoformat() if s.destroyed_on else None,
        ),
        ExportColumn("destroyed_on_islamic", "Destruction Date (Islamic)", lambda s: s.destroyed_on_islamic, False),
        ExportColumn("description", "Description", lambda s: s.description, False),
        ExportColumn("coordinates", "Coordinates (Lat, Lng)", _coordinates),
        ExportColumn(
            "historical_significance",
            "Historical Significance",
            lambda s: s.historical_significance,
            False,
        ),
    )
}

DEFAULT_EXPORT_COLUMNS = tuple(cid for cid, c in EXPORT_COLUMNS.items() if c.default_included)


def sites_to_frame(sites: Sequence[Site], columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """
    Tabulate sites for export, one row per site in the given order.

    :param columns: export column ids, defaults to DEFAULT_EXPORT_COLUMNS
    :return: a DataFrame whose headers are the column labels
    :raises KeyError: on an unknown column id
    """
    column_ids = tuple(columns) if columns is not None else DEFAULT_EXPORT_COLUMNS
    unknown = [c for c in column_ids if c not in EXPORT_COLUMNS]
    if unknown:
        raise KeyError(f"Unknown export columns: {unknown}")

    cols = [EXPORT_COLUMNS[c] for c in column_ids]
    return pd.DataFrame(
        [[col.get_value(site) for col in cols] for site in sites],
        columns=[col.label for col in cols],
    )


def export_csv(
        sites: Sequence[Site],
        columns: Optional[Sequence[str]] = None,
        include_headers: bool = True,
) -> str:
    """
    RFC 4180 CSV: CRLF line endings, fields quoted only when they contain
    a comma, quote or line break, embedded quotes doubled.
    """
    df = sites_to_frame(sites, columns)
    text = df.to_csv(index=False, header=include_headers, lineterminator="\r\n")
    logger.info("sites_exported", extra={"format": "csv", "n_sites": len(df)})
    return text


def export_json(sites: Sequence[Site], columns: Optional[Sequence[str]] = None) -> str:
    """
    JSON array of objects keyed by export column id.
    """
    column_ids = tuple(columns) if columns is not None else DEFAULT_EXPORT_COLUMNS
    df = sites_to_frame(sites, column_ids)
    df.columns = list(column_ids)
    # object dtype keeps None as null instead of NaN
    records = df.astype(object).where(df.notna(), None).to_dict(orient="records")
    logger.info("sites_exported", extra={"format": "json", "n_sites": len(records)})
    return json.dumps(records, ensure_ascii=False, indent=2)
