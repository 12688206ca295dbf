from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from pokedex_browser.core.filter_state import HEIGHT_BOUNDS, WEIGHT_BOUNDS
from pokedex_browser.ui.helpers import get_type_dropdown_options
from pokedex_browser.ui.ids import IDs


def range_label(title: str, value) -> str:
    lo, hi = value
    return f"{title}: {lo} - {hi}"


def build_filter_panel() -> dbc.Card:
    h_min, h_max = HEIGHT_BOUNDS
    w_min, w_max = WEIGHT_BOUNDS

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            html.Label("Type", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.TYPE_SELECT,
                                # Real options arrive once the type list is loaded
                                options=get_type_dropdown_options([]),
                                value="",
                                clearable=False,
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        [
                            html.Label(
                                range_label("Height Range", HEIGHT_BOUNDS),
                                id=IDs.Control.HEIGHT_RANGE_LABEL,
                                className="form-label",
                            ),
                            dcc.RangeSlider(
                                id=IDs.Control.HEIGHT_RANGE,
                                min=h_min,
                                max=h_max,
                                step=1,
                                value=[h_min, h_max],
                                marks=None,
                                tooltip={"placement": "bottom"},
                            ),
                        ],
                        className="mb-3",
                    ),
                    html.Div(
                        [
                            html.Label(
                                range_label("Weight Range", WEIGHT_BOUNDS),
                                id=IDs.Control.WEIGHT_RANGE_LABEL,
                                className="form-label",
                            ),
                            dcc.RangeSlider(
                                id=IDs.Control.WEIGHT_RANGE,
                                min=w_min,
                                max=w_max,
                                step=10,
                                value=[w_min, w_max],
                                marks=None,
                                tooltip={"placement": "bottom"},
                            ),
                        ],
                    ),
                ]
            ),
        ],
        className="pdx-sidebar",
    )
