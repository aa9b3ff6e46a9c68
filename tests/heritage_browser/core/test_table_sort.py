from __future__ import annotations

from datetime import date

import pytest

from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.core.table_sort import SortDirection, SortField, SortState, sort_key, sort_sites


def _make_site(site_id: str, **overrides) -> Site:
    fields = dict(
        id=site_id,
        name=f"Site {site_id}",
        category=SiteCategory.MOSQUE,
        status=SiteStatus.DAMAGED,
    )
    fields.update(overrides)
    return Site(**fields)


def _ids(sites) -> list:
    return [s.id for s in sites]


def test_ties_keep_original_order_in_both_directions():
    sites = [
        _make_site("a", status=SiteStatus.DESTROYED),
        _make_site("b", status=SiteStatus.DAMAGED),
        _make_site("c", status=SiteStatus.DESTROYED),
        _make_site("d", status=SiteStatus.DAMAGED),
    ]
    assert _ids(sort_sites(sites, SortField.STATUS, SortDirection.ASC)) == ["b", "d", "a", "c"]
    assert _ids(sort_sites(sites, SortField.STATUS, SortDirection.DESC)) == ["a", "c", "b", "d"]


def test_status_sorts_by_severity_not_alphabetically():
    sites = [
        _make_site("heavy", status=SiteStatus.HEAVILY_DAMAGED),
        _make_site("destroyed", status=SiteStatus.DESTROYED),
        _make_site("damaged", status=SiteStatus.DAMAGED),
    ]
    assert _ids(sort_sites(sites, SortField.STATUS)) == ["damaged", "heavy", "destroyed"]


def test_name_sort_is_case_insensitive():
    sites = [_make_site("1", name="beta"), _make_site("2", name="Alpha"), _make_site("3", name="gamma")]
    assert _ids(sort_sites(sites, SortField.NAME)) == ["2", "1", "3"]


def test_missing_dates_go_last_in_both_directions():
    sites = [
        _make_site("none1"),
        _make_site("early", destroyed_on=date(2023, 10, 9)),
        _make_site("none2"),
        _make_site("late", destroyed_on=date(2024, 3, 1)),
    ]
    assert _ids(sort_sites(sites, SortField.DESTROYED_ON, SortDirection.ASC)) == ["early", "late", "none1", "none2"]
    assert _ids(sort_sites(sites, SortField.DESTROYED_ON, SortDirection.DESC)) == ["late", "early", "none1", "none2"]


def test_year_built_sorts_by_parsed_year():
    sites = [
        _make_site("modern", year_built="1950"),
        _make_site("bce", year_built="800 BCE"),
        _make_site("unknown", year_built="Ottoman era"),
        _make_site("century", year_built="7th century"),
    ]
    assert _ids(sort_sites(sites, SortField.YEAR_BUILT)) == ["bce", "century", "modern", "unknown"]


def test_sort_does_not_mutate_input():
    sites = [_make_site("b", name="b"), _make_site("a", name="a")]
    snapshot = list(sites)
    sort_sites(sites, SortField.NAME)
    assert sites == snapshot


def test_default_sort_state_is_newest_destruction_first():
    state = SortState()
    assert state.field is SortField.DESTROYED_ON
    assert state.direction is SortDirection.DESC


def test_selecting_same_field_twice_flips_direction():
    state = SortState(SortField.NAME, SortDirection.ASC)
    once = state.select(SortField.NAME)
    twice = once.select(SortField.NAME)
    assert once.direction is SortDirection.DESC
    assert twice == state


def test_selecting_new_field_starts_ascending():
    state = SortState(SortField.NAME, SortDirection.DESC).select(SortField.STATUS)
    assert state == SortState(SortField.STATUS, SortDirection.ASC)


def test_sort_state_dict_roundtrip_and_bad_values():
    state = SortState(SortField.YEAR_BUILT, SortDirection.ASC)
    assert SortState.from_dict(state.to_dict()) == state
    assert SortState.from_dict({}) == SortState()
    with pytest.raises(ValueError):
        SortState.from_dict({"field": "colour"})


def test_sort_key_projections():
    site = _make_site(
        "a",
        name="Great Omari Mosque",
        status=SiteStatus.HEAVILY_DAMAGED,
        year_built="800-900 BCE",
    )

    assert sort_key(SortField.NAME)(site) == "great omari mosque"
    assert sort_key(SortField.STATUS)(site) == 75
    assert sort_key(SortField.YEAR_BUILT)(site) == -850
    assert sort_key(SortField.DESTROYED_ON)(site) is None
