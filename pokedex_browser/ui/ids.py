from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"
        THEME_MODE = "theme-mode"

    class Control:
        ROOT = "pdx-root"

        # Navbar
        THEME_TOGGLE = "theme-toggle"

        # Filters
        TYPE_SELECT = "type-select"
        HEIGHT_RANGE = "height-range"
        WEIGHT_RANGE = "weight-range"
        HEIGHT_RANGE_LABEL = "height-range-label"
        WEIGHT_RANGE_LABEL = "weight-range-label"

        # Results
        CARD_GRID = "card-grid"
        STATUS_TEXT = "status-text"
        LOAD_POLL = "load-poll"

        # Pagination
        PREV_PAGE_BTN = "prev-page-btn"
        NEXT_PAGE_BTN = "next-page-btn"
        PAGE_LABEL = "page-label"
