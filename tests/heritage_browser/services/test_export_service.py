from __future__ import annotations

import json
from datetime import date

import pytest

from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.services.export_service import (
    DEFAULT_EXPORT_COLUMNS,
    EXPORT_COLUMNS,
    export_csv,
    export_json,
    sites_to_frame,
)


def _make_site(site_id: str, **overrides) -> Site:
    fields = dict(
        id=site_id,
        name=f"Site {site_id}",
        category=SiteCategory.MOSQUE,
        status=SiteStatus.DESTROYED,
    )
    fields.update(overrides)
    return Site(**fields)


@pytest.fixture()
def sites():
    return [
        _make_site(
            "omari",
            name="Great Omari Mosque",
            year_built="7th century",
            destroyed_on=date(2023, 12, 8),
            coordinates=(31.5042, 34.4643),
        ),
        _make_site(
            "quoted",
            name='The "Old" Souq',
            category=SiteCategory.HISTORIC_BUILDING,
            status=SiteStatus.DAMAGED,
            description="Line one\nline two",
        ),
    ]


def test_default_columns_exclude_long_text_and_islamic_dates():
    assert "description" not in DEFAULT_EXPORT_COLUMNS
    assert "year_built_islamic" not in DEFAULT_EXPORT_COLUMNS
    assert DEFAULT_EXPORT_COLUMNS[:2] == ("name", "name_arabic")


def test_sites_to_frame_uses_labels_as_headers(sites):
    df = sites_to_frame(sites, ["name", "status", "destroyed_on"])

    assert list(df.columns) == [EXPORT_COLUMNS[c].label for c in ("name", "status", "destroyed_on")]
    assert df.iloc[0].tolist() == ["Great Omari Mosque", "destroyed", "2023-12-08"]


def test_sites_to_frame_unknown_column_raises(sites):
    with pytest.raises(KeyError):
        sites_to_frame(sites, ["name", "population"])


def test_export_csv_quotes_and_crlf(sites):
    text = export_csv(sites, ["name", "coordinates", "description"])
    lines = text.split("\r\n")

    assert lines[0] == "Name,\"Coordinates (Lat, Lng)\",Description"
    assert lines[1] == 'Great Omari Mosque,"31.5042, 34.4643",'
    # embedded quotes doubled, embedded newline kept inside the quoted field
    assert lines[2] == '"The ""Old"" Souq",,"Line one\nline two"'
    assert text.endswith("\r\n")


def test_export_csv_without_headers(sites):
    text = export_csv(sites, ["name"], include_headers=False)
    assert text == 'Great Omari Mosque\r\n"The ""Old"" Souq"\r\n'


def test_export_json_keeps_missing_values_as_null(sites):
    records = json.loads(export_json(sites, ["name", "destroyed_on", "coordinates"]))

    assert records == [
        {"name": "Great Omari Mosque", "destroyed_on": "2023-12-08", "coordinates": "31.5042, 34.4643"},
        {"name": 'The "Old" Souq', "destroyed_on": None, "coordinates": None},
    ]


def test_export_empty_selection():
    assert export_csv([], ["name", "status"]) == "Name,Status\r\n"
    assert json.loads(export_json([])) == []
