from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.ranges import default_date_range, default_year_range
from heritage_browser.ui.helpers import ERA_OPTIONS, ERA_CE, get_filter_dropdown_options
from heritage_browser.ui.ids import IDs


def _year_row(label: str, input_id: str, era_id: str, placeholder: str) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label"),
            dbc.InputGroup(
                [
                    dbc.Input(
                        id=input_id,
                        type="number",
                        min=0,
                        step=1,
                        placeholder=placeholder,
                        debounce=True,
                    ),
                    dbc.Select(
                        id=era_id,
                        options=ERA_OPTIONS,
                        value=ERA_CE,
                        style={"maxWidth": "90px"},
                    ),
                ],
                size="sm",
                className="mb-3",
            ),
        ]
    )


def build_filter_panel(catalog: SiteCatalog) -> dbc.Card:
    category_options, status_options = get_filter_dropdown_options(catalog)
    date_range = default_date_range(catalog.sites)
    year_range = default_year_range(catalog.sites)

    built_from_hint = "" if year_range.start is None else f"e.g. {abs(year_range.start)} {year_range.start_era}"
    built_to_hint = "" if year_range.end is None else f"e.g. {abs(year_range.end)} {year_range.end_era}"

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Span("Filters", className="fw-semibold"),
                        dbc.Badge(
                            "Unapplied changes",
                            id=IDs.Control.UNAPPLIED_BADGE,
                            color="warning",
                            className="ms-auto",
                            style={"display": "none"},
                        ),
                    ],
                    className="d-flex align-items-center",
                )
            ),
            dbc.CardBody(
                [
                    html.Label("Search", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="search",
                        placeholder="Name or description",
                        debounce=True,
                        className="mb-3",
                    ),
                    html.Label("Site type", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.CATEGORY_SELECT,
                        options=category_options,
                        multi=True,
                        placeholder="All types",
                        className="mb-3",
                    ),
                    html.Label("Status", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.STATUS_SELECT,
                        options=status_options,
                        multi=True,
                        placeholder="All statuses",
                        className="mb-3",
                    ),
                    html.Label("Date destroyed", className="form-label d-block"),
                    dcc.DatePickerRange(
                        id=IDs.Control.DESTROYED_RANGE,
                        min_date_allowed=date_range.start,
                        max_date_allowed=date_range.end,
                        initial_visible_month=date_range.start,
                        display_format="YYYY-MM-DD",
                        clearable=True,
                        className="mb-3",
                    ),
                    _year_row("Built from", IDs.Control.BUILT_FROM, IDs.Control.BUILT_FROM_ERA, built_from_hint),
                    _year_row("Built to", IDs.Control.BUILT_TO, IDs.Control.BUILT_TO_ERA, built_to_hint),
                    html.Div(
                        [
                            dbc.Button(
                                "Apply",
                                id=IDs.Control.APPLY_BTN,
                                color="primary",
                                size="sm",
                                disabled=True,
                            ),
                            dbc.Button(
                                "Cancel",
                                id=IDs.Control.CANCEL_BTN,
                                color="secondary",
                                outline=True,
                                size="sm",
                                disabled=True,
                            ),
                            dbc.Button(
                                "Clear",
                                id=IDs.Control.CLEAR_BTN,
                                color="link",
                                size="sm",
                                disabled=True,
                            ),
                        ],
                        className="d-flex gap-2",
                    ),
                ]
            ),
        ],
        className="hb-sidebar",
    )
