from __future__ import annotations

from pokedex_browser.core.record import Record
from pokedex_browser.ui.callbacks.callbacks_theme import toggle_mode
from pokedex_browser.ui.helpers import (
    build_record_card,
    capitalize,
    get_type_dropdown_options,
    gradient_color,
    theme_class,
)


def test_capitalize():
    assert capitalize("bulbasaur") == "Bulbasaur"
    assert capitalize("MR-MIME") == "Mr-mime"
    assert capitalize("") == ""


def test_gradient_color_endpoints_and_clamp():
    assert gradient_color(0, 0, 20) == "rgb(255, 0, 0)"
    assert gradient_color(20, 0, 20) == "rgb(0, 255, 0)"
    assert gradient_color(10, 0, 20) == "rgb(128, 128, 0)"
    assert gradient_color(5000, 0, 1000) == "rgb(0, 255, 0)"


def test_type_dropdown_has_all_option_first():
    options = get_type_dropdown_options(["fire", "grass"])
    assert options[0] == {"label": "All", "value": ""}
    assert options[1:] == [
        {"label": "Fire", "value": "fire"},
        {"label": "Grass", "value": "grass"},
    ]


def test_theme_toggle_and_class():
    assert toggle_mode("light") == "dark"
    assert toggle_mode("dark") == "light"
    assert toggle_mode(None) == "dark"
    assert theme_class("dark") == "pdx-root pdx-theme-dark"
    assert theme_class("bogus") == "pdx-root pdx-theme-light"


def test_record_card_shows_capitalised_name_and_type():
    rec = Record(25, "pikachu", 4, 60, "electric", "https://img/25.png")
    card = build_record_card(rec)

    body = card.children
    title, sprite, type_line = body.children[:3]
    assert title.children == "Pikachu"
    assert sprite.src == "https://img/25.png"
    assert type_line.children == "Type: Electric"
