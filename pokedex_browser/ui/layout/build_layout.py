from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from pokedex_browser.ui.config import AppConfig
from pokedex_browser.ui.helpers import THEME_LIGHT, theme_class
from pokedex_browser.ui.ids import IDs
from pokedex_browser.ui.layout.build_filter_panel import build_filter_panel
from pokedex_browser.ui.layout.build_navbar import build_navbar
from pokedex_browser.ui.layout.build_results_panel import build_results_panel


def build_layout(ctx: AppConfig):
    navbar = build_navbar(ctx.settings)
    filter_panel = build_filter_panel()
    results_panel = build_results_panel()

    return dbc.Container(
        fluid=True,
        id=IDs.Control.ROOT,
        className=theme_class(THEME_LIGHT),
        children=[
            navbar,

            # Per-session stores
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.THEME_MODE, storage_type="session", data=THEME_LIGHT),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, className="mt-3"),
                    dbc.Col(results_panel, md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
