from __future__ import annotations

import pytest

from heritage_browser.core.filter_session import FilterSession
from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.filter_updates import SetCategories, SetSearchTerm
from heritage_browser.core.site import SiteCategory, SiteStatus


def _make_session() -> FilterSession:
    return FilterSession(FilterCriteria(statuses={SiteStatus.DESTROYED}))


def test_new_session_has_no_unapplied_changes():
    session = _make_session()
    assert session.draft == session.applied
    assert not session.is_editing
    assert not session.has_unapplied_changes
    assert session.has_active_filters


def test_update_draft_then_discard_leaves_applied_untouched():
    session = _make_session()
    applied_before = session.applied

    session.open_edit_session()
    session.update_draft(search_term="mosque")
    assert session.has_unapplied_changes

    session.discard()
    assert session.applied == applied_before
    assert session.draft == applied_before
    assert not session.has_unapplied_changes
    assert not session.is_editing


def test_commit_moves_draft_to_applied():
    session = _make_session()
    session.open_edit_session()
    session.update_draft(SetCategories({SiteCategory.CHURCH}), SetSearchTerm("st"))
    session.commit()

    assert session.applied.categories == frozenset({SiteCategory.CHURCH})
    assert session.applied.search_term == "st"
    assert session.applied.statuses == frozenset({SiteStatus.DESTROYED})
    assert not session.is_editing
    assert not session.has_unapplied_changes


def test_open_edit_session_resets_draft_to_applied():
    session = _make_session()
    session.open_edit_session()
    session.update_draft(search_term="abandoned")
    session.open_edit_session()
    assert session.draft == session.applied


def test_update_draft_unknown_field_raises():
    with pytest.raises(TypeError):
        _make_session().update_draft(colour="red")


def test_update_applied_syncs_draft_when_not_editing():
    session = _make_session()
    session.update_applied(search_term="omari")
    assert session.applied.search_term == "omari"
    assert session.draft == session.applied


def test_update_applied_keeps_draft_while_editing():
    session = _make_session()
    session.open_edit_session()
    session.update_draft(search_term="draft")
    session.update_applied(statuses=frozenset())

    assert session.applied.statuses == frozenset()
    assert session.draft.search_term == "draft"


def test_clear_applied_and_clear_draft():
    session = _make_session()
    session.clear_applied()
    assert session.applied.is_empty()
    assert session.draft.is_empty()
    assert not session.has_active_filters

    session.open_edit_session()
    session.update_draft(search_term="x")
    assert session.has_draft_filters
    session.clear_draft()
    assert not session.has_draft_filters


def test_on_change_fires_only_on_real_changes():
    session = _make_session()
    seen = []
    unsubscribe = session.on_change(seen.append)

    session.discard()
    assert seen == []

    session.open_edit_session()
    session.update_draft(search_term="mosque")
    assert len(seen) == 2
    assert seen[-1].has_unapplied_changes

    unsubscribe()
    session.commit()
    assert len(seen) == 2


def test_failing_listener_does_not_break_others():
    session = _make_session()
    seen = []

    def broken(_state):
        raise RuntimeError("boom")

    session.on_change(broken)
    session.on_change(seen.append)
    session.update_applied(search_term="x")

    assert len(seen) == 1


def test_state_snapshot_is_immutable():
    state = _make_session().get_state()
    with pytest.raises(AttributeError):
        state.is_editing = True


def test_to_from_dict_roundtrip_while_editing():
    session = _make_session()
    session.open_edit_session()
    session.update_draft(search_term="mosque")

    restored = FilterSession.from_dict(session.to_dict())
    assert restored.get_state() == session.get_state()


def test_from_dict_not_editing_syncs_draft():
    data = {"applied": {"statuses": ["damaged"]}, "draft": {"search_term": "stale"}, "is_editing": False}
    restored = FilterSession.from_dict(data)
    assert restored.draft == restored.applied
