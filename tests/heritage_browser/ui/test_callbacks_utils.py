from __future__ import annotations

from heritage_browser.config.model import TableLayoutConfig
from heritage_browser.core.filter_session import FilterSession
from heritage_browser.core.site import SiteStatus
from heritage_browser.core.table_sort import SortDirection, SortField, SortState
from heritage_browser.ui.callbacks.callbacks_utils import (
    layout_engine_from_store,
    session_from_store,
    sort_state_from_store,
    try_parse_session,
)


def test_session_store_roundtrip_keeps_draft_while_editing():
    session = FilterSession()
    session.open_edit_session()
    session.update_draft(statuses={SiteStatus.DESTROYED})

    restored = session_from_store(session.to_dict())

    assert restored.is_editing
    assert restored.draft.statuses == frozenset({SiteStatus.DESTROYED})
    assert restored.applied.is_empty()


def test_unreadable_session_store_falls_back_to_fresh_session():
    assert try_parse_session(None) is None
    assert try_parse_session({}) is None
    assert try_parse_session({"applied": {"destroyed_from": "not-a-date"}}) is None

    session = session_from_store("garbage")
    assert not session.is_editing
    assert session.applied.is_empty()


def test_sort_state_from_store():
    stored = SortState(SortField.NAME, SortDirection.ASC).to_dict()
    assert sort_state_from_store(stored) == SortState(SortField.NAME, SortDirection.ASC)
    assert sort_state_from_store({"field": "population"}) == SortState()
    assert sort_state_from_store(None) == SortState()


def test_layout_engine_from_store_restores_clamped_width():
    config = TableLayoutConfig()

    engine = layout_engine_from_store({"width": 900, "viewport_width": 1200}, config)
    # (1200 - 48) * 0.6 = 691.2 -> 691
    assert engine.effective_max_width == 691
    assert engine.width == 691

    fallback = layout_engine_from_store({"width": "wide"}, config)
    assert fallback.width == config.initial_width
    assert layout_engine_from_store(None, config).width == config.initial_width
