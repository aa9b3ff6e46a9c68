from __future__ import annotations
import logging
from typing import Optional

from heritage_browser.config.model import TableLayoutConfig
from heritage_browser.core.filter_session import FilterSession
from heritage_browser.core.table_layout import TableLayoutEngine
from heritage_browser.core.table_sort import SortState

logger = logging.getLogger(__name__)


def try_parse_session(data: object) -> Optional[FilterSession]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return FilterSession.from_dict(data)
    except Exception:
        logger.exception("Invalid filter-session: %r", data)
        return None


def session_from_store(data: object) -> FilterSession:
    """Stored session, or a fresh one if the store is empty or unreadable."""
    return try_parse_session(data) or FilterSession()


def sort_state_from_store(data: object) -> SortState:
    if not isinstance(data, dict):
        return SortState()
    try:
        return SortState.from_dict(data)
    except ValueError:
        logger.warning("Invalid sort-state, using default: %r", data)
        return SortState()


def layout_engine_from_store(data: object, config: TableLayoutConfig) -> TableLayoutEngine:
    if not isinstance(data, dict):
        return TableLayoutEngine(config)
    try:
        return TableLayoutEngine.from_dict(data, config)
    except (TypeError, ValueError):
        logger.warning("Invalid table-layout, using default: %r", data)
        return TableLayoutEngine(config)
