from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, exceptions

from pokedex_browser.ui.helpers import get_type_dropdown_options
from pokedex_browser.ui.ids import IDs
from pokedex_browser.ui.layout.build_filter_panel import range_label

if TYPE_CHECKING:
    from pokedex_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Type dropdown options, once the type list has arrived
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TYPE_SELECT, "options"),
        Input(IDs.Control.LOAD_POLL, "n_intervals"),
    )
    def update_type_options(_n):
        snapshot = ctx.catalog.view_model().snapshot()
        if snapshot.loading and not snapshot.type_options:
            raise exceptions.PreventUpdate
        return get_type_dropdown_options(snapshot.type_options)

    # ---------------------------------------------------------
    # Slider labels
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.HEIGHT_RANGE_LABEL, "children"),
        Output(IDs.Control.WEIGHT_RANGE_LABEL, "children"),
        Input(IDs.Control.HEIGHT_RANGE, "value"),
        Input(IDs.Control.WEIGHT_RANGE, "value"),
    )
    def update_range_labels(height_val, weight_val):
        return (
            range_label("Height Range", height_val),
            range_label("Weight Range", weight_val),
        )
