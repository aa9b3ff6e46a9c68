from __future__ import annotations

import json
from datetime import date

import pytest

from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.filter_session import FilterSession
from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.core.table_sort import SortDirection, SortField, SortState
from heritage_browser.ui.callbacks.callbacks_table import export_applied_sites


def _make_catalog() -> SiteCatalog:
    return SiteCatalog(
        "downloads",
        [
            Site(id="b", name="Beta", category=SiteCategory.CHURCH, status=SiteStatus.DESTROYED),
            Site(id="a", name="Alpha", category=SiteCategory.MOSQUE, status=SiteStatus.DESTROYED),
            Site(id="c", name="Gamma", category=SiteCategory.MUSEUM, status=SiteStatus.DAMAGED),
        ],
    )


def _session_data(**applied) -> dict:
    session = FilterSession()
    session.update_applied(**applied)
    return session.to_dict()


def test_json_export_holds_applied_sites_in_table_order():
    content, filename = export_applied_sites(
        _make_catalog(),
        _session_data(statuses={SiteStatus.DESTROYED}),
        SortState(SortField.NAME, SortDirection.ASC).to_dict(),
        "json",
        today=date(2024, 1, 15),
    )

    assert filename == "heritage-sites-2024-01-15.json"
    assert [r["name"] for r in json.loads(content)] == ["Alpha", "Beta"]


def test_csv_export_ignores_draft_edits():
    session = FilterSession()
    session.open_edit_session()
    session.update_draft(statuses={SiteStatus.DAMAGED})

    content, filename = export_applied_sites(
        _make_catalog(),
        session.to_dict(),
        SortState(SortField.NAME, SortDirection.DESC).to_dict(),
        "csv",
        today=date(2024, 1, 15),
    )

    assert filename.endswith(".csv")
    names = [line.split(",")[0] for line in content.split("\r\n")[1:] if line]
    assert names == ["Gamma", "Beta", "Alpha"]


def test_unknown_export_format_raises():
    with pytest.raises(ValueError):
        export_applied_sites(_make_catalog(), None, None, "xml")
