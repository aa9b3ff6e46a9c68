from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.filter_updates import FilterUpdate, apply_updates, updates_from_fields
from heritage_browser.core.observable import StateNotifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSessionState:
    applied: FilterCriteria
    draft: FilterCriteria
    is_editing: bool

    @property
    def has_active_filters(self) -> bool:
        return not self.applied.is_empty()

    @property
    def has_unapplied_changes(self) -> bool:
        return self.draft != self.applied

    @property
    def has_draft_filters(self) -> bool:
        return not self.draft.is_empty()


class FilterSession(StateNotifier[FilterSessionState]):
    """
    Owns the "applied" criteria (what the table shows) and the "draft" criteria
    (what the filter panel is editing).

    Lifecycle:
    - open_edit_session(): draft <- applied
    - update_draft(...): field-by-field replace on the draft
    - commit(): applied <- draft, editing closed
    - discard(): draft <- applied, editing closed, applied untouched

    Nothing here can fail on well-typed input; there is no I/O.
    """

    def __init__(self, applied: Optional[FilterCriteria] = None):
        super().__init__()
        self._applied = applied if applied is not None else FilterCriteria.empty()
        self._draft = self._applied
        self._is_editing = False
        self._last_published = self.get_state()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def applied(self) -> FilterCriteria:
        return self._applied

    @property
    def draft(self) -> FilterCriteria:
        return self._draft

    @property
    def is_editing(self) -> bool:
        return self._is_editing

    @property
    def has_active_filters(self) -> bool:
        return self.get_state().has_active_filters

    @property
    def has_unapplied_changes(self) -> bool:
        return self.get_state().has_unapplied_changes

    @property
    def has_draft_filters(self) -> bool:
        return self.get_state().has_draft_filters

    def get_state(self) -> FilterSessionState:
        return FilterSessionState(
            applied=self._applied,
            draft=self._draft,
            is_editing=self._is_editing,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def open_edit_session(self) -> None:
        # FilterCriteria is immutable, so sharing the value is a copy
        self._draft = self._applied
        self._is_editing = True
        self._publish()

    def update_draft(self, *updates: FilterUpdate, **fields: Any) -> None:
        """
        Replace draft fields, either with typed updates or keyword fields:

            session.update_draft(SetSearchTerm("mosque"))
            session.update_draft(search_term="mosque")

        Raises:
            TypeError: on an unknown keyword field
        """
        all_updates = list(updates) + updates_from_fields(fields)
        self._draft = apply_updates(self._draft, all_updates)
        self._publish()

    def update_applied(self, *updates: FilterUpdate, **fields: Any) -> None:
        """Direct setters on the applied slot (e.g. removing one active filter chip)."""
        all_updates = list(updates) + updates_from_fields(fields)
        self._applied = apply_updates(self._applied, all_updates)
        if not self._is_editing:
            self._draft = self._applied
        self._publish()

    def commit(self) -> None:
        self._applied = self._draft
        self._is_editing = False
        logger.info("filters_applied", extra={"criteria": self._applied.to_dict()})
        self._publish()

    def discard(self) -> None:
        self._draft = self._applied
        self._is_editing = False
        self._publish()

    def clear_applied(self) -> None:
        self._applied = FilterCriteria.empty()
        if not self._is_editing:
            self._draft = self._applied
        self._publish()

    def clear_draft(self) -> None:
        self._draft = FilterCriteria.empty()
        self._publish()

    # ------------------------------------------------------------------
    # Store (de)serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "applied": self._applied.to_dict(),
            "draft": self._draft.to_dict(),
            "is_editing": self._is_editing,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterSession:
        session = cls(FilterCriteria.from_dict(data.get("applied") or {}))
        if data.get("is_editing"):
            session._draft = FilterCriteria.from_dict(data.get("draft") or {})
            session._is_editing = True
        session._last_published = session.get_state()
        return session
