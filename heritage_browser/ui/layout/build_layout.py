from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from heritage_browser.core.filter_session import FilterSession
from heritage_browser.core.table_layout import TableLayoutEngine
from heritage_browser.core.table_sort import SortState
from heritage_browser.ui.ids import IDs
from heritage_browser.ui.layout.build_filter_panel import build_filter_panel
from heritage_browser.ui.layout.build_navbar import build_navbar
from heritage_browser.ui.layout.build_plot_panel import build_plot_panel
from heritage_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from heritage_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    gc = ctx.global_config
    layout_config = gc.table_layout

    navbar = build_navbar(gc, len(ctx.catalog))
    filter_panel = build_filter_panel(ctx.catalog)
    table_panel = build_table_panel(ctx.variants, gc.default_variant, layout_config)
    plot_panel = build_plot_panel(ctx.registry)

    return dbc.Container(
        fluid=True,
        className="hb-root",
        children=[
            navbar,

            # App-level stores
            dcc.Store(id=IDs.Store.FILTER_SESSION, storage_type="session", data=FilterSession().to_dict()),
            dcc.Store(id=IDs.Store.SORT_STATE, storage_type="session", data=SortState().to_dict()),
            dcc.Store(
                id=IDs.Store.TABLE_LAYOUT,
                storage_type="local",
                data=TableLayoutEngine(layout_config).to_dict(),
            ),
            dcc.Store(id=IDs.Store.VIEWPORT_WIDTH),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, className="mt-3"),
                    dbc.Col(table_panel, width="auto", className="mt-3"),
                    dbc.Col(plot_panel, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
