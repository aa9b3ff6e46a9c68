from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional, Tuple

import dash
from dash import Input, Output, State, dcc, exceptions

from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.table_sort import SortField
from heritage_browser.services.export_service import export_csv, export_json
from heritage_browser.ui.callbacks.callbacks_utils import (
    layout_engine_from_store,
    session_from_store,
    sort_state_from_store,
)
from heritage_browser.ui.helpers import table_columns, table_records
from heritage_browser.ui.ids import IDs

if TYPE_CHECKING:
    from heritage_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# Reports window.innerWidth into the viewport store, only when it changed.
VIEWPORT_WIDTH_JS = """
function(n_intervals, current) {
    var width = window.innerWidth;
    if (current === width) {
        return window.dash_clientside.no_update;
    }
    return width;
}
"""

_EXPORTERS = {
    "csv": export_csv,
    "json": export_json,
}


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    layout_config = ctx.global_config.table_layout

    app.clientside_callback(
        VIEWPORT_WIDTH_JS,
        Output(IDs.Store.VIEWPORT_WIDTH, "data"),
        Input(IDs.Control.VIEWPORT_POLL, "n_intervals"),
        State(IDs.Store.VIEWPORT_WIDTH, "data"),
    )

    # ---------------------------------------------------------
    # Width handle + viewport -> layout store
    #
    # Slider drags are replayed as a pointer gesture on a fresh engine
    # restored from the store: start, move to the handle position, release.
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TABLE_LAYOUT, "data"),
        Output(IDs.Control.TABLE_WIDTH_HANDLE, "max"),
        Output(IDs.Control.TABLE_WIDTH_HANDLE, "value"),
        Input(IDs.Control.TABLE_WIDTH_HANDLE, "drag_value"),
        Input(IDs.Control.TABLE_WIDTH_HANDLE, "value"),
        Input(IDs.Store.VIEWPORT_WIDTH, "data"),
        State(IDs.Store.TABLE_LAYOUT, "data"),
    )
    def update_table_width(drag_value, released_value, viewport_width, layout_data):
        engine = layout_engine_from_store(layout_data, layout_config)
        engine.mount()

        triggered_id = dash.ctx.triggered_id
        if triggered_id == IDs.Store.VIEWPORT_WIDTH:
            if viewport_width is None:
                raise exceptions.PreventUpdate
            engine.on_viewport_resize(float(viewport_width))
        elif triggered_id == IDs.Control.TABLE_WIDTH_HANDLE:
            prop = dash.ctx.triggered[0]["prop_id"].rsplit(".", 1)[-1]
            handle_width = drag_value if prop == "drag_value" else released_value
            if handle_width is None:
                raise exceptions.PreventUpdate
            engine.start_resize()
            engine.on_pointer_move(float(handle_width) + layout_config.left_offset)
            engine.end_resize()

        data = engine.to_dict()
        engine.teardown()
        return data, engine.effective_max_width, engine.width

    # ---------------------------------------------------------
    # Header clicks -> sort store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SORT_STATE, "data"),
        Output(IDs.Control.SITES_TABLE, "sort_by"),
        Input(IDs.Control.SITES_TABLE, "sort_by"),
        State(IDs.Store.SORT_STATE, "data"),
    )
    def update_sort(sort_by, sort_data):
        state = sort_state_from_store(sort_data)

        if dash.ctx.triggered_id == IDs.Control.SITES_TABLE:
            if sort_by:
                try:
                    state = state.select(SortField(sort_by[0]["column_id"]))
                except (KeyError, ValueError):
                    logger.warning("Unsortable column: %r", sort_by)
                    raise exceptions.PreventUpdate
            else:
                # the table cycles asc -> desc -> none; "none" is another click on the same header
                state = state.select(state.field)

        return state.to_dict(), [{"column_id": state.field.value, "direction": state.direction.value}]

    # ---------------------------------------------------------
    # Applied filters + sort + layout + variant -> table
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SITES_TABLE, "data"),
        Output(IDs.Control.SITES_TABLE, "columns"),
        Output(IDs.Control.SITES_TABLE, "sort_action"),
        Output(IDs.Control.TABLE_CONTAINER, "style"),
        Output(IDs.Control.TABLE_WIDTH_HANDLE, "disabled"),
        Output(IDs.Control.TABLE_WIDTH_LABEL, "children"),
        Output(IDs.Control.DOWNLOAD_CSV_BTN, "disabled"),
        Output(IDs.Control.DOWNLOAD_JSON_BTN, "disabled"),
        Input(IDs.Store.FILTER_SESSION, "data"),
        Input(IDs.Store.SORT_STATE, "data"),
        Input(IDs.Store.TABLE_LAYOUT, "data"),
        Input(IDs.Control.VARIANT_SELECT, "value"),
    )
    def render_table(session_data, sort_data, layout_data, variant_id):
        variant = ctx.variants.get(variant_id) or ctx.variants.default()
        if variant is None:
            raise exceptions.PreventUpdate

        session = session_from_store(session_data)
        sites = list(ctx.catalog.filter(session.applied).sites)
        if variant.enable_sort:
            sites = sort_state_from_store(sort_data).apply(sites)

        if variant.resizable:
            engine = layout_engine_from_store(layout_data, layout_config)
            columns = engine.visible_columns()
            style = {"width": f"{engine.width:.0f}px"}
            width_label = f"{engine.width:.0f}px"
        else:
            columns = variant.visible_columns
            style = {"width": "100%"}
            width_label = ""

        logger.debug(
            "render_table",
            extra={"variant": variant.id, "n_rows": len(sites), "columns": list(columns)},
        )

        return (
            table_records(sites, columns),
            table_columns(columns),
            "custom" if variant.enable_sort else "none",
            style,
            not variant.resizable,
            width_label,
            not variant.enable_export,
            not variant.enable_export,
        )

    # ---------------------------------------------------------
    # CSV / JSON download of the applied, sorted rows
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Input(IDs.Control.DOWNLOAD_CSV_BTN, "n_clicks"),
        State(IDs.Store.FILTER_SESSION, "data"),
        State(IDs.Store.SORT_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_csv(n_clicks, session_data, sort_data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        content, filename = export_applied_sites(ctx.catalog, session_data, sort_data, "csv")
        return dcc.send_string(content, filename)

    @app.callback(
        Output(IDs.Control.DOWNLOAD_JSON, "data"),
        Input(IDs.Control.DOWNLOAD_JSON_BTN, "n_clicks"),
        State(IDs.Store.FILTER_SESSION, "data"),
        State(IDs.Store.SORT_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_json(n_clicks, session_data, sort_data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        content, filename = export_applied_sites(ctx.catalog, session_data, sort_data, "json")
        return dcc.send_string(content, filename)


def export_applied_sites(
        catalog: SiteCatalog,
        session_data: object,
        sort_data: object,
        fmt: str,
        today: Optional[date] = None,
) -> Tuple[str, str]:
    """
    Serialise the sites matching the applied filters, in table order.

    :param fmt: "csv" or "json"
    :return: (file content, download filename)
    :raises ValueError: on an unknown format
    """
    if fmt not in _EXPORTERS:
        raise ValueError(f"Unknown export format '{fmt}'")

    session = session_from_store(session_data)
    sites = sort_state_from_store(sort_data).apply(catalog.filter(session.applied).sites)
    filename = f"heritage-sites-{(today or date.today()).isoformat()}.{fmt}"
    return _EXPORTERS[fmt](sites), filename
