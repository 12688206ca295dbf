from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from pokedex_browser.config.model import AppSettings
from pokedex_browser.ui.ids import IDs


def build_navbar(settings: AppSettings) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(settings.ui_title, className="mb-0 pdx-title"),
                        html.Small(settings.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: theme toggle
                dbc.Button(
                    "Dark mode",
                    id=IDs.Control.THEME_TOGGLE,
                    color="secondary",
                    outline=True,
                    size="sm",
                    className="ms-auto",
                    n_clicks=0,
                ),
            ],
        ),
        className="shadow-sm pdx-navbar",
    )
