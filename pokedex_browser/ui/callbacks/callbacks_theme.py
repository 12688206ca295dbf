from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from pokedex_browser.ui.helpers import THEME_DARK, THEME_LIGHT, theme_class
from pokedex_browser.ui.ids import IDs

if TYPE_CHECKING:
    from pokedex_browser.ui.config import AppConfig


def toggle_mode(mode: str | None) -> str:
    return THEME_LIGHT if mode == THEME_DARK else THEME_DARK


def register_theme_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Store.THEME_MODE, "data"),
        Input(IDs.Control.THEME_TOGGLE, "n_clicks"),
        State(IDs.Store.THEME_MODE, "data"),
        prevent_initial_call=True,
    )
    def flip_theme(_n, mode):
        return toggle_mode(mode)

    @app.callback(
        Output(IDs.Control.ROOT, "className"),
        Output(IDs.Control.THEME_TOGGLE, "children"),
        Input(IDs.Store.THEME_MODE, "data"),
    )
    def apply_theme(mode):
        label = "Light mode" if mode == THEME_DARK else "Dark mode"
        return theme_class(mode), label
