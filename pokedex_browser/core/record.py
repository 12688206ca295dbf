from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pokedex_browser.core.exceptions import DetailFetchError


@dataclass(frozen=True)
class Record:
    """
    One Pokémon as displayed by the browser.

    Fields:

    - id: National dex id assigned by the API.
    - height_units: height in decimetres.
    - weight_units: weight in hectograms.
    - primary_type_name: first type tag (lowest slot), "" if none listed.
    - sprite_url: front sprite, only used for rendering.
    """
    id: int
    name: str
    height_units: int
    weight_units: int
    primary_type_name: str
    sprite_url: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> Record:
        """Build a Record from a PokéAPI /pokemon/{id} response body."""
        if not isinstance(payload, dict):
            raise DetailFetchError("Unexpected Pokémon detail payload")

        missing = [k for k in ("id", "name", "height", "weight") if payload.get(k) is None]
        if missing:
            raise DetailFetchError(
                f"Pokémon detail payload is missing {', '.join(missing)}"
            )

        types = sorted(payload.get("types") or [], key=lambda t: t.get("slot", 0))
        primary_type = types[0].get("type", {}).get("name", "") if types else ""

        sprites = payload.get("sprites") or {}

        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            height_units=max(0, int(payload["height"])),
            weight_units=max(0, int(payload["weight"])),
            primary_type_name=primary_type,
            sprite_url=sprites.get("front_default"),
        )
