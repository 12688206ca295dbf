from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

HEIGHT_BOUNDS: Tuple[int, int] = (0, 20)
WEIGHT_BOUNDS: Tuple[int, int] = (0, 1000)
PAGE_SIZE = 20


def _normalise_range(value: Any, bounds: Tuple[int, int]) -> Tuple[int, int]:
    lo_bound, hi_bound = bounds
    if value is None:
        return bounds
    lo, hi = (int(v) for v in value)
    if lo > hi:
        lo, hi = hi, lo
    lo = min(max(lo, lo_bound), hi_bound)
    hi = min(max(hi, lo_bound), hi_bound)
    return lo, hi


@dataclass(frozen=True)
class FilterConfig:
    """
    Represents the current user filter selection.

    Fields:

    - type_name: primary type to match, "" means no constraint.
    - height_range: inclusive (min, max) height in decimetres, within HEIGHT_BOUNDS.
    - weight_range: inclusive (min, max) weight in hectograms, within WEIGHT_BOUNDS.

    Ranges are clamped and reordered on construction, so min <= max always holds.
    """
    type_name: str = ""
    height_range: Tuple[int, int] = HEIGHT_BOUNDS
    weight_range: Tuple[int, int] = WEIGHT_BOUNDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "type_name", self.type_name or "")
        object.__setattr__(self, "height_range", _normalise_range(self.height_range, HEIGHT_BOUNDS))
        object.__setattr__(self, "weight_range", _normalise_range(self.weight_range, WEIGHT_BOUNDS))

    @classmethod
    def default(cls) -> FilterConfig:
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type_name": self.type_name,
            "height_range": list(self.height_range),
            "weight_range": list(self.weight_range),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterConfig:
        return cls(
            type_name=data.get("type_name") or "",
            height_range=data.get("height_range") or HEIGHT_BOUNDS,
            weight_range=data.get("weight_range") or WEIGHT_BOUNDS,
        )


@dataclass
class PageState:
    page_index: int = 0
    page_size: int = PAGE_SIZE
