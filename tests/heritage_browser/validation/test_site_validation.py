from __future__ import annotations

import logging

import pytest

from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.validation.errors import ValidationError
from heritage_browser.validation.site_validation import (
    unparsable_year_issues,
    validate_sites,
    warn_on_invalid_sites,
)


def _make_site(site_id: str, **overrides) -> Site:
    fields = dict(
        id=site_id,
        name=f"Site {site_id}",
        category=SiteCategory.CHURCH,
        status=SiteStatus.DAMAGED,
    )
    fields.update(overrides)
    return Site(**fields)


def test_valid_catalog_passes():
    validate_sites([_make_site("a"), _make_site("b")])


def test_duplicate_ids_and_empty_names_are_reported_together():
    sites = [_make_site("a"), _make_site("a"), _make_site("c", name="  ")]

    with pytest.raises(ValidationError) as excinfo:
        validate_sites(sites)

    codes = [issue.code for issue in excinfo.value.issues]
    assert codes == ["SITE_DUPLICATE_ID", "SITE_EMPTY_NAME"]
    assert excinfo.value.issues[1].site_id == "c"


def test_unparsable_years_are_informational():
    sites = [
        _make_site("a", year_built="1250"),
        _make_site("b", year_built=""),
        _make_site("c", year_built="Mamluk era"),
    ]
    issues = unparsable_year_issues(sites)
    assert [i.site_id for i in issues] == ["c"]


def test_warn_on_invalid_sites_logs_and_never_raises(caplog):
    logger = logging.getLogger("test_site_validation")
    sites = [_make_site("a"), _make_site("a", year_built="unknown")]

    with caplog.at_level(logging.INFO, logger="test_site_validation"):
        warn_on_invalid_sites(sites, logger)

    levels = [r.levelno for r in caplog.records]
    assert logging.WARNING in levels
    assert any("SITE_DUPLICATE_ID" in r.getMessage() for r in caplog.records)
    assert any(r.getMessage() == "Sites with unparsable construction years" for r in caplog.records)
