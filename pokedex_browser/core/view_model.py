from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pokedex_browser.core.filter_state import PAGE_SIZE, FilterConfig, PageState
from pokedex_browser.core.record import Record

logger = logging.getLogger(__name__)


def apply_filter(records: Iterable[Record], config: FilterConfig) -> List[Record]:
    """Stable filter on type, height range and weight range (all inclusive)."""
    h_min, h_max = config.height_range
    w_min, w_max = config.weight_range
    return [
        r
        for r in records
        if (not config.type_name or r.primary_type_name == config.type_name)
        and h_min <= r.height_units <= h_max
        and w_min <= r.weight_units <= w_max
    ]


def paginate(filtered: Sequence[Record], page_state: PageState) -> Tuple[List[Record], int]:
    """
    Slice one page out of the filtered list.

    Returns (page_slice, total_pages). An out-of-range page index yields an
    empty slice rather than an error.
    """
    size = page_state.page_size
    total_pages = math.ceil(len(filtered) / size) if filtered else 0
    start = max(page_state.page_index, 0) * size
    return list(filtered[start:start + size]), total_pages


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything the rendering layer needs for one frame."""
    loading: bool
    error: Optional[str]
    page_slice: Tuple[Record, ...]
    total_pages: int
    current_page_index: int
    type_options: Tuple[str, ...]


@dataclass
class ViewModel:
    """
    Owns the ingested record set plus the mutable filter/page state and
    derives the visible page from them on demand.

    Once `fail()` has been called the model is in a terminal error state and
    further ingestion is ignored.
    """
    page_size: int = PAGE_SIZE

    records: Tuple[Record, ...] = ()
    type_options: Tuple[str, ...] = ()
    filter_config: FilterConfig = field(default_factory=FilterConfig.default)
    page_state: PageState = field(init=False)
    error: Optional[str] = None

    _records_ready: bool = field(default=False, repr=False)
    _types_ready: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        self.page_state = PageState(page_index=0, page_size=self.page_size)

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------
    @property
    def loading(self) -> bool:
        if self.error is not None:
            return False
        return not (self._records_ready and self._types_ready)

    def ingest_records(self, records: Iterable[Record]) -> None:
        if self.error is not None:
            logger.debug("Ignoring record set after error")
            return
        self.records = tuple(records)
        self._records_ready = True

    def ingest_types(self, names: Iterable[str]) -> None:
        if self.error is not None:
            logger.debug("Ignoring type list after error")
            return
        self.type_options = tuple(names)
        self._types_ready = True

    def fail(self, message: str) -> None:
        if self.error is None:
            self.error = message

    # ------------------------------------------------------------------
    # Derivations
    # ------------------------------------------------------------------
    @property
    def filtered(self) -> List[Record]:
        return apply_filter(self.records, self.filter_config)

    @property
    def total_pages(self) -> int:
        return paginate(self.filtered, self.page_state)[1]

    @property
    def page_slice(self) -> List[Record]:
        return paginate(self.filtered, self.page_state)[0]

    def snapshot(self) -> ViewSnapshot:
        if self.error is not None or self.loading:
            page_slice: List[Record] = []
            total_pages = 0
        else:
            page_slice, total_pages = paginate(self.filtered, self.page_state)
        return ViewSnapshot(
            loading=self.loading,
            error=self.error,
            page_slice=tuple(page_slice),
            total_pages=total_pages,
            current_page_index=self.page_state.page_index,
            type_options=self.type_options,
        )

    # ------------------------------------------------------------------
    # User intents
    # ------------------------------------------------------------------
    def set_filter(self, new_config: FilterConfig) -> None:
        self.filter_config = new_config
        self.page_state.page_index = 0

    def set_type_filter(self, name: Optional[str]) -> None:
        self.set_filter(
            FilterConfig(
                type_name=name or "",
                height_range=self.filter_config.height_range,
                weight_range=self.filter_config.weight_range,
            )
        )

    def set_height_range(self, lo: int, hi: int) -> None:
        self.set_filter(
            FilterConfig(
                type_name=self.filter_config.type_name,
                height_range=(lo, hi),
                weight_range=self.filter_config.weight_range,
            )
        )

    def set_weight_range(self, lo: int, hi: int) -> None:
        self.set_filter(
            FilterConfig(
                type_name=self.filter_config.type_name,
                height_range=self.filter_config.height_range,
                weight_range=(lo, hi),
            )
        )

    def turn_page(self, direction: int) -> None:
        if direction == 1:
            if self.page_state.page_index + 1 < self.total_pages:
                self.page_state.page_index += 1
        elif direction == -1:
            if self.page_state.page_index > 0:
                self.page_state.page_index -= 1
        else:
            raise ValueError(f"direction must be +1 or -1, got {direction!r}")

    # ------------------------------------------------------------------
    # Per-session state (kept in a dcc.Store by the UI)
    # ------------------------------------------------------------------
    def view_state(self) -> Dict[str, Any]:
        return {
            "filter": self.filter_config.to_dict(),
            "page_index": self.page_state.page_index,
        }

    def restore(self, view_state: Optional[Dict[str, Any]]) -> None:
        if not view_state:
            return
        self.filter_config = FilterConfig.from_dict(view_state.get("filter") or {})
        self.page_state.page_index = max(int(view_state.get("page_index") or 0), 0)
