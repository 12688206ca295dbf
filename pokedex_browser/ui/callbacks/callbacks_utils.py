from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from pokedex_browser.core.filter_state import FilterConfig

logger = logging.getLogger(__name__)

def try_parse_view_state(data: object) -> Optional[Dict[str, Any]]:
    """
    Validate a view-state store payload. Returns a normalised copy, or None
    if the payload is empty or unusable (logged).
    """
    if not isinstance(data, dict) or not data:
        return None
    try:
        config = FilterConfig.from_dict(data.get("filter") or {})
        page_index = max(int(data.get("page_index") or 0), 0)
    except (TypeError, ValueError, AttributeError):
        logger.exception("Invalid view-state: %r", data)
        return None
    return {"filter": config.to_dict(), "page_index": page_index}
