from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from heritage_browser.config.model import TableLayoutConfig
from heritage_browser.config.table_variants import TableVariantRegistry
from heritage_browser.ui.helpers import sites_table
from heritage_browser.ui.ids import IDs

# Polling interval for the clientside viewport-width reporter
VIEWPORT_POLL_MS = 500


def build_table_panel(
    variants: TableVariantRegistry,
    default_variant: str,
    layout: TableLayoutConfig,
) -> dbc.Card:
    variant_options = [{"label": v.label, "value": v.id} for v in variants.all()]

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Sites"),
                        dbc.Select(
                            id=IDs.Control.VARIANT_SELECT,
                            options=variant_options,
                            value=default_variant,
                            size="sm",
                            className="ms-auto",
                            style={"maxWidth": "200px"},
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.ACTIVE_FILTERS, className="d-flex flex-wrap gap-1 mb-2"),
                    html.Div(
                        [
                            html.Small("Table width", className="text-muted me-2"),
                            html.Div(
                                dcc.Slider(
                                    id=IDs.Control.TABLE_WIDTH_HANDLE,
                                    min=layout.min_width,
                                    max=layout.max_width,
                                    step=1,
                                    value=layout.initial_width,
                                    marks=None,
                                    updatemode="mouseup",
                                ),
                                className="flex-grow-1",
                            ),
                            html.Small(id=IDs.Control.TABLE_WIDTH_LABEL, className="text-muted ms-2"),
                        ],
                        className="d-flex align-items-center mb-2",
                    ),
                    html.Div(
                        sites_table(IDs.Control.SITES_TABLE),
                        id=IDs.Control.TABLE_CONTAINER,
                        style={"width": f"{layout.initial_width}px"},
                    ),
                    dcc.Interval(id=IDs.Control.VIEWPORT_POLL, interval=VIEWPORT_POLL_MS),
                ]
            ),
        ],
        className="hb-tablecard",
    )
