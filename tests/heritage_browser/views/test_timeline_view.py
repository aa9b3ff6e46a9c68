from __future__ import annotations

from datetime import date

from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.views.timeline_view import TimelineView


def _make_site(site_id: str, **overrides) -> Site:
    fields = dict(
        id=site_id,
        name=f"Site {site_id}",
        category=SiteCategory.MOSQUE,
        status=SiteStatus.DAMAGED,
    )
    fields.update(overrides)
    return Site(**fields)


def _make_view() -> TimelineView:
    catalog = SiteCatalog(
        "timeline",
        [
            _make_site("a", destroyed_on=date(2023, 10, 19), status=SiteStatus.DESTROYED),
            _make_site("b", destroyed_on=date(2023, 10, 25)),
            _make_site("c", destroyed_on=date(2023, 11, 2), status=SiteStatus.DESTROYED),
            _make_site("d"),
        ],
    )
    return TimelineView(catalog)


def test_compute_data_respects_applied_filters():
    view = _make_view()
    df = view.compute_data(FilterCriteria(statuses={SiteStatus.DESTROYED}))
    assert list(df["count"]) == [1, 1]


def test_render_figure_is_a_bar_chart():
    view = _make_view()
    criteria = FilterCriteria.empty()
    fig = view.render_figure(view.compute_data(criteria), criteria)

    assert fig.data[0].type == "bar"
    assert list(fig.data[0].y) == [2, 1]


def test_render_figure_empty_message():
    view = _make_view()
    criteria = FilterCriteria(search_term="no such site")
    fig = view.render_figure(view.compute_data(criteria), criteria)

    assert len(fig.data) == 0
    assert "No dated sites" in fig.layout.title.text
