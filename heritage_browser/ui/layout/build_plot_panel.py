from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from heritage_browser.core.view_registry import ViewRegistry
from heritage_browser.ui.ids import IDs


def build_plot_panel(registry: ViewRegistry) -> dbc.Card:
    view_options = registry.options()

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Plot"),
                        dbc.Select(
                            id=IDs.Control.VIEW_SELECT,
                            options=view_options,
                            value=view_options[0]["value"] if view_options else None,
                            size="sm",
                            className="ms-auto",
                            style={"maxWidth": "220px"},
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.MAIN_GRAPH,
                            style={"height": "420px"},
                            config={"responsive": True},
                        ),
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Download sites (CSV)",
                                id=IDs.Control.DOWNLOAD_CSV_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 ms-auto me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                            dbc.Button(
                                "Download sites (JSON)",
                                id=IDs.Control.DOWNLOAD_JSON_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                                className="mt-2 me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_JSON),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ],
            ),
        ],
        className="hb-maincard",
    )
