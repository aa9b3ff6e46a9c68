from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from heritage_browser.config.model import GlobalConfig
from heritage_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, n_sites: int) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    dbc.Badge(
                        f"{n_sites} of {n_sites} sites",
                        id=IDs.Control.RESULT_COUNT,
                        color="secondary",
                        className="fs-6",
                    ),
                    className="ms-auto",
                    style={"marginRight": "24px"},
                ),
            ],
        ),
        dark=False,
        className="shadow-sm hb-navbar",
    )
