from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
import dash_bootstrap_components as dbc
from dash import ALL, Input, Output, State, exceptions

from heritage_browser.core.filter_state import active_filter_labels, without_filter
from heritage_browser.core.filter_updates import updates_to
from heritage_browser.ui.callbacks.callbacks_utils import session_from_store
from heritage_browser.ui.helpers import controls_from_criteria, criteria_from_controls
from heritage_browser.ui.ids import IDs, filter_chip_id

if TYPE_CHECKING:
    from heritage_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _style(flag: bool) -> dict:
    return {} if flag else {"display": "none"}


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Filter panel <-> session store
    #
    # One callback owns both directions: control edits go to the draft,
    # buttons and chips move the session, and the controls are re-synced
    # to the resulting draft.
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_SESSION, "data"),
        Output(IDs.Control.CATEGORY_SELECT, "value"),
        Output(IDs.Control.STATUS_SELECT, "value"),
        Output(IDs.Control.DESTROYED_RANGE, "start_date"),
        Output(IDs.Control.DESTROYED_RANGE, "end_date"),
        Output(IDs.Control.BUILT_FROM, "value"),
        Output(IDs.Control.BUILT_FROM_ERA, "value"),
        Output(IDs.Control.BUILT_TO, "value"),
        Output(IDs.Control.BUILT_TO_ERA, "value"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.CATEGORY_SELECT, "value"),
        Input(IDs.Control.STATUS_SELECT, "value"),
        Input(IDs.Control.DESTROYED_RANGE, "start_date"),
        Input(IDs.Control.DESTROYED_RANGE, "end_date"),
        Input(IDs.Control.BUILT_FROM, "value"),
        Input(IDs.Control.BUILT_FROM_ERA, "value"),
        Input(IDs.Control.BUILT_TO, "value"),
        Input(IDs.Control.BUILT_TO_ERA, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.APPLY_BTN, "n_clicks"),
        Input(IDs.Control.CANCEL_BTN, "n_clicks"),
        Input(IDs.Control.CLEAR_BTN, "n_clicks"),
        Input(filter_chip_id(ALL), "n_clicks"),
        State(IDs.Store.FILTER_SESSION, "data"),
        prevent_initial_call=True,
    )
    def update_filter_session(
            categories,
            statuses,
            destroyed_from,
            destroyed_to,
            built_from,
            built_from_era,
            built_to,
            built_to_era,
            search_term,
            _apply_clicks,
            _cancel_clicks,
            _clear_clicks,
            _chip_clicks,
            session_data,
    ):
        session = session_from_store(session_data)
        triggered_id = dash.ctx.triggered_id

        if triggered_id == IDs.Control.APPLY_BTN:
            session.commit()
        elif triggered_id == IDs.Control.CANCEL_BTN:
            session.discard()
        elif triggered_id == IDs.Control.CLEAR_BTN:
            session.clear_applied()
            session.discard()
        elif isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.FILTER_CHIP:
            # chips re-rendered with n_clicks=0 also land here
            if not dash.ctx.triggered[0].get("value"):
                raise exceptions.PreventUpdate
            try:
                remaining = without_filter(session.applied, triggered_id["index"])
            except KeyError:
                logger.warning("Unknown filter chip: %r", triggered_id)
                raise exceptions.PreventUpdate
            session.update_applied(*updates_to(remaining))
        else:
            try:
                draft = criteria_from_controls(
                    categories,
                    statuses,
                    destroyed_from,
                    destroyed_to,
                    built_from,
                    built_from_era,
                    built_to,
                    built_to_era,
                    search_term,
                )
            except ValueError:
                logger.warning("Ignoring unparsable filter input", extra={"triggered_id": str(triggered_id)})
                raise exceptions.PreventUpdate
            if draft == session.draft:
                raise exceptions.PreventUpdate
            if not session.is_editing:
                session.open_edit_session()
            session.update_draft(*updates_to(draft))

        return (session.to_dict(), *controls_from_criteria(session.draft))

    # ---------------------------------------------------------
    # Session store -> buttons, badge, chips, result count
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.APPLY_BTN, "disabled"),
        Output(IDs.Control.CANCEL_BTN, "disabled"),
        Output(IDs.Control.CLEAR_BTN, "disabled"),
        Output(IDs.Control.UNAPPLIED_BADGE, "style"),
        Output(IDs.Control.ACTIVE_FILTERS, "children"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Input(IDs.Store.FILTER_SESSION, "data"),
    )
    def update_filter_summary(session_data):
        state = session_from_store(session_data).get_state()
        result = ctx.catalog.filter(state.applied)

        chips = [
            dbc.Button(
                f"{label} ×",
                id=filter_chip_id(key),
                n_clicks=0,
                color="light",
                size="sm",
                className="hb-filter-chip",
            )
            for key, label in active_filter_labels(state.applied)
        ]

        return (
            not state.has_unapplied_changes,
            not state.is_editing,
            not (state.has_active_filters or state.has_draft_filters),
            _style(state.has_unapplied_changes),
            chips,
            f"{result.count} of {result.total} sites",
        )
