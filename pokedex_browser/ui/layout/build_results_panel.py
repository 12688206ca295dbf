from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from pokedex_browser.ui.ids import IDs


def build_results_panel() -> html.Div:
    return html.Div(
        [
            html.Div("Loading...", id=IDs.Control.STATUS_TEXT, className="pdx-status"),
            dcc.Loading(
                html.Div(id=IDs.Control.CARD_GRID, className="pdx-grid"),
                type="circle",
            ),
            html.Div(
                [
                    dbc.Button(
                        "Previous Page",
                        id=IDs.Control.PREV_PAGE_BTN,
                        n_clicks=0,
                        disabled=True,
                        className="pdx-card",
                    ),
                    html.Span("Page 1", id=IDs.Control.PAGE_LABEL, className="mx-3"),
                    dbc.Button(
                        "Next Page",
                        id=IDs.Control.NEXT_PAGE_BTN,
                        n_clicks=0,
                        disabled=True,
                        className="pdx-card",
                    ),
                ],
                className="pdx-pagination d-flex align-items-center justify-content-center my-3",
            ),
            # Polls the catalog until ingestion settles, then gets disabled
            dcc.Interval(id=IDs.Control.LOAD_POLL, interval=500, disabled=False),
        ]
    )
