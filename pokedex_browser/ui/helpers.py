from __future__ import annotations

from typing import Iterable, List

import dash_bootstrap_components as dbc
from dash import html

from pokedex_browser.core.filter_state import HEIGHT_BOUNDS, WEIGHT_BOUNDS
from pokedex_browser.core.record import Record

THEME_LIGHT = "light"
THEME_DARK = "dark"


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:].lower()


def gradient_color(value: float, lo: float, hi: float) -> str:
    """Red at `lo`, green at `hi`; values outside the range are clamped."""
    if hi <= lo:
        percent = 1.0
    else:
        percent = min(max((value - lo) / (hi - lo), 0.0), 1.0)
    r = round(255 * (1 - percent))
    g = round(255 * percent)
    return f"rgb({r}, {g}, 0)"


def get_type_dropdown_options(type_names: Iterable[str]) -> List[dict]:
    options = [{"label": "All", "value": ""}]
    options.extend({"label": capitalize(name), "value": name} for name in type_names)
    return options


def theme_class(mode: str | None) -> str:
    mode = THEME_DARK if mode == THEME_DARK else THEME_LIGHT
    return f"pdx-root pdx-theme-{mode}"


def build_record_card(record: Record) -> dbc.Card:
    h_min, h_max = HEIGHT_BOUNDS
    w_min, w_max = WEIGHT_BOUNDS

    sprite = (
        html.Img(src=record.sprite_url, alt=record.name, className="pdx-sprite")
        if record.sprite_url
        else html.Div("No sprite", className="pdx-sprite pdx-sprite-missing text-muted")
    )
    primary_type = capitalize(record.primary_type_name) if record.primary_type_name else "Unknown"

    return dbc.Card(
        dbc.CardBody(
            [
                html.H5(capitalize(record.name), className="card-title"),
                sprite,
                html.P(f"Type: {primary_type}", className="mb-1"),
                html.P(
                    [
                        "Height: ",
                        html.Span(
                            record.height_units,
                            style={"color": gradient_color(record.height_units, h_min, h_max)},
                        ),
                    ],
                    className="mb-1",
                ),
                html.P(
                    [
                        "Weight: ",
                        html.Span(
                            record.weight_units,
                            style={"color": gradient_color(record.weight_units, w_min, w_max)},
                        ),
                    ],
                    className="mb-0",
                ),
            ]
        ),
        className="pdx-card text-center",
    )
