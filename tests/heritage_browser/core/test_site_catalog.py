from __future__ import annotations

from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.site import Site, SiteCategory, SiteStatus


def _make_site(site_id: str, **overrides) -> Site:
    fields = dict(
        id=site_id,
        name=f"Site {site_id}",
        category=SiteCategory.MOSQUE,
        status=SiteStatus.DAMAGED,
    )
    fields.update(overrides)
    return Site(**fields)


def _make_catalog() -> SiteCatalog:
    return SiteCatalog(
        "test",
        [
            _make_site("a", category=SiteCategory.CHURCH, status=SiteStatus.DESTROYED),
            _make_site("b", category=SiteCategory.MOSQUE),
            _make_site("c", category=SiteCategory.MOSQUE, status=SiteStatus.DESTROYED),
        ],
    )


def test_lookup_by_id():
    catalog = _make_catalog()
    assert len(catalog) == 3
    assert catalog.get("b").category is SiteCategory.MOSQUE
    assert catalog.get("missing") is None


def test_filter_is_cached_per_criteria_value():
    catalog = _make_catalog()
    first = catalog.filter(FilterCriteria(statuses={SiteStatus.DESTROYED}))
    second = catalog.filter(FilterCriteria(statuses=[SiteStatus.DESTROYED]))

    assert second is first
    assert [s.id for s in first.sites] == ["a", "c"]


def test_filter_cache_is_bounded():
    catalog = _make_catalog()
    for i in range(SiteCatalog.MAX_FILTER_CACHE + 5):
        catalog.filter(FilterCriteria(search_term=f"term-{i}"))
    assert len(catalog._filter_cache) <= SiteCatalog.MAX_FILTER_CACHE


def test_valid_sets_and_options_only_list_present_values():
    catalog = _make_catalog()
    valid = catalog.valid_sets()

    assert valid.categories == frozenset({SiteCategory.CHURCH, SiteCategory.MOSQUE})
    assert valid.ids == frozenset({"a", "b", "c"})
    assert catalog.category_options() == (SiteCategory.MOSQUE, SiteCategory.CHURCH)
    assert catalog.status_options() == (SiteStatus.DESTROYED, SiteStatus.DAMAGED)


def test_duplicate_ids_keep_first_record():
    catalog = SiteCatalog("dups", [_make_site("x", name="first"), _make_site("x", name="second")])
    assert catalog.get("x").name == "first"
    assert len(catalog) == 2
