from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, html

from pokedex_browser.core.view_model import ViewSnapshot
from pokedex_browser.ui.callbacks.callbacks_utils import try_parse_view_state
from pokedex_browser.ui.helpers import build_record_card
from pokedex_browser.ui.ids import IDs

if TYPE_CHECKING:
    from pokedex_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_snapshot(snapshot: ViewSnapshot, n_matches: Optional[int] = None) -> tuple:
    """
    Map a ViewSnapshot onto the outputs of the results panel:
    (cards, status, page label, prev disabled, next disabled, poll disabled).
    """
    if snapshot.error is not None:
        status = html.Span(snapshot.error, className="pdx-status-error")
        return [], status, "", True, True, True

    if snapshot.loading:
        return [], "Loading...", "", True, True, False

    if not snapshot.page_slice:
        status = "No Pokémon match the current filters."
    elif n_matches is not None:
        status = f"{n_matches} Pokémon match the current filters."
    else:
        status = ""

    page = snapshot.current_page_index
    total = snapshot.total_pages
    cards = [build_record_card(r) for r in snapshot.page_slice]
    page_label = f"Page {page + 1} of {max(total, 1)}"

    return cards, status, page_label, page == 0, page + 1 >= total, True


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # View state -> card grid + pagination
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.CARD_GRID, "children"),
        Output(IDs.Control.STATUS_TEXT, "children"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PREV_PAGE_BTN, "disabled"),
        Output(IDs.Control.NEXT_PAGE_BTN, "disabled"),
        Output(IDs.Control.LOAD_POLL, "disabled"),
        Input(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Control.LOAD_POLL, "n_intervals"),
    )
    def update_results(vs_data: dict[str, Any] | None, _n):
        vm = ctx.catalog.view_model()
        vm.restore(try_parse_view_state(vs_data))

        try:
            snapshot = vm.snapshot()
            n_matches = None if snapshot.loading or snapshot.error else len(vm.filtered)
        except Exception:
            logger.exception("Error while deriving the visible page", extra={"view_state": vs_data})
            vm.fail("Something went wrong while rendering this page.")
            snapshot, n_matches = vm.snapshot(), None

        logger.debug(
            "render",
            extra={
                "loading": snapshot.loading,
                "page_index": snapshot.current_page_index,
                "total_pages": snapshot.total_pages,
            },
        )
        return render_snapshot(snapshot, n_matches)
