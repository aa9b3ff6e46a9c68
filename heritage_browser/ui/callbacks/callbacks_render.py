from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import pandas as pd
import plotly.graph_objs as go
from dash import Input, Output

from heritage_browser.ui.callbacks.callbacks_utils import try_parse_session
from heritage_browser.ui.ids import IDs

if TYPE_CHECKING:
    from heritage_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=title if details is None else f"{title}<br><br>{details}",
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Could not draw this view.", details)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Applied filters + selected view -> figure
    #
    # Draft edits never reach this callback's output: the view is
    # computed from session.applied only.
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Input(IDs.Store.FILTER_SESSION, "data"),
        Input(IDs.Control.VIEW_SELECT, "value"),
    )
    def update_main_graph(session_data: dict[str, Any] | None, view_id: str | None):
        if not view_id:
            return _message_figure("No view selected.", "Pick a view above the plot.")

        session = try_parse_session(session_data)
        if session is None:
            return _error_figure("The stored filter session could not be read.")

        if ctx.registry is None or view_id not in ctx.registry:
            logger.warning("Unknown view requested", extra={"view_id": view_id})
            return _error_figure(f"There is no view called '{view_id}'.")

        applied = session.applied
        try:
            view = ctx.registry.create(view_id, ctx.catalog)
            data = view.timed_compute(applied)

            if isinstance(data, pd.DataFrame) and data.empty:
                return _message_figure(
                    "No sites to plot.",
                    "The applied filters match no sites for this view. Remove a filter chip to widen the selection.",
                )

            fig = view.render_figure(data, applied)
            # empty figures carry their own message as the title
            if fig.data:
                result = ctx.catalog.filter(applied)
                fig.update_layout(title=f"{view.label} ({result.count} of {result.total} sites)")
            return fig

        except Exception:
            logger.exception(
                "Error in update_main_graph",
                extra={"view_id": view_id, "criteria": applied.to_dict()},
            )
            return _error_figure("Unexpected error while computing the view. Details are in the server log.")
