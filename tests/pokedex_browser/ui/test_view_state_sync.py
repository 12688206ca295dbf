from __future__ import annotations

from pokedex_browser.core.record import Record
from pokedex_browser.core.view_model import ViewModel
from pokedex_browser.ui.callbacks.callbacks_render import render_snapshot
from pokedex_browser.ui.callbacks.callbacks_sync import next_view_state
from pokedex_browser.ui.callbacks.callbacks_utils import try_parse_view_state
from pokedex_browser.ui.ids import IDs


def _vm(n: int = 45) -> ViewModel:
    vm = ViewModel()
    vm.ingest_records(
        Record(i, f"mon-{i}", 5, 50, "fire" if i % 3 else "grass") for i in range(n)
    )
    vm.ingest_types(["fire", "grass"])
    return vm


def _state(type_name="", height=(0, 20), weight=(0, 1000), page=0):
    return {
        "filter": {"type_name": type_name, "height_range": list(height), "weight_range": list(weight)},
        "page_index": page,
    }


def test_initial_call_keeps_default_state():
    state = next_view_state(_vm(), None, None, "", [0, 20], [0, 1000])
    assert state == _state()


def test_next_and_prev_buttons_turn_page_within_bounds():
    state = next_view_state(_vm(), _state(), IDs.Control.NEXT_PAGE_BTN, "", [0, 20], [0, 1000])
    assert state["page_index"] == 1

    state = next_view_state(_vm(), _state(page=2), IDs.Control.NEXT_PAGE_BTN, "", [0, 20], [0, 1000])
    assert state["page_index"] == 2

    state = next_view_state(_vm(), _state(), IDs.Control.PREV_PAGE_BTN, "", [0, 20], [0, 1000])
    assert state["page_index"] == 0


def test_filter_change_resets_page():
    state = next_view_state(
        _vm(), _state(page=2), IDs.Control.TYPE_SELECT, "grass", [0, 20], [0, 1000]
    )
    assert state == _state(type_name="grass")


def test_invalid_store_payload_falls_back_to_defaults():
    assert try_parse_view_state({"filter": {"height_range": ["a", "b"]}}) is None
    assert try_parse_view_state("garbage") is None
    assert try_parse_view_state({"page_index": -4}) == _state()


def test_render_snapshot_pagination_outputs():
    vm = _vm()
    vm.turn_page(+1)
    vm.turn_page(+1)

    cards, status, label, prev_disabled, next_disabled, poll_disabled = render_snapshot(
        vm.snapshot(), len(vm.filtered)
    )

    assert len(cards) == 5
    assert status == "45 Pokémon match the current filters."
    assert label == "Page 3 of 3"
    assert prev_disabled is False
    assert next_disabled is True
    assert poll_disabled is True


def test_render_snapshot_loading_keeps_polling():
    outputs = render_snapshot(ViewModel().snapshot())
    assert outputs == ([], "Loading...", "", True, True, False)


def test_render_snapshot_error_replaces_content():
    vm = ViewModel()
    vm.fail("Failed to fetch Pokémon list")

    cards, status, _label, prev_disabled, next_disabled, poll_disabled = render_snapshot(vm.snapshot())

    assert cards == []
    assert status.children == "Failed to fetch Pokémon list"
    assert (prev_disabled, next_disabled, poll_disabled) == (True, True, True)
