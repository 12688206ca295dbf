from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import dash
from dash import Input, Output, State

from pokedex_browser.core.filter_state import FilterConfig
from pokedex_browser.core.view_model import ViewModel
from pokedex_browser.ui.callbacks.callbacks_utils import try_parse_view_state
from pokedex_browser.ui.ids import IDs

if TYPE_CHECKING:
    from pokedex_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def next_view_state(
        vm: ViewModel,
        current: object,
        triggered_id: Optional[str],
        type_value: Optional[str],
        height_value: Optional[Sequence[int]],
        weight_value: Optional[Sequence[int]],
) -> Dict[str, Any]:
    """
    Pure helper: apply one user intent to the stored view state.

    Page buttons turn the page; any filter control replaces the FilterConfig,
    which resets the page index.
    """
    vm.restore(try_parse_view_state(current))

    if triggered_id == IDs.Control.PREV_PAGE_BTN:
        vm.turn_page(-1)
    elif triggered_id == IDs.Control.NEXT_PAGE_BTN:
        vm.turn_page(+1)
    else:
        new_config = FilterConfig(
            type_name=type_value or "",
            height_range=height_value,
            weight_range=weight_value,
        )
        # Initial call fires with unchanged controls; keep the page then
        if new_config != vm.filter_config:
            vm.set_filter(new_config)

    return vm.view_state()


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI intents -> view state (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        Input(IDs.Control.HEIGHT_RANGE, "value"),
        Input(IDs.Control.WEIGHT_RANGE, "value"),
        Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
    )
    def sync_view_state_from_ui(type_val, height_val, weight_val, _prev, _next, current):
        triggered_id = dash.ctx.triggered_id
        vm = ctx.catalog.view_model()

        state = next_view_state(vm, current, triggered_id, type_val, height_val, weight_val)
        logger.debug("view_state_updated", extra={"trigger": triggered_id, "view_state": state})
        return state
