from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict

from pokedex_browser.config.model import AppSettings
from pokedex_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_OVERRIDES: Dict[str, str] = {
    "POKEDEX_API_BASE_URL": "api_base_url",
    "POKEDEX_MAX_RECORDS": "max_records",
    "POKEDEX_REQUEST_TIMEOUT": "request_timeout",
}


def _coerce(key: str, value: Any, cast: Callable[[Any], Any]) -> Any:
    try:
        return cast(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for '{key}': {value!r}") from e


def load_settings(root: Path | str = Path("config")) -> AppSettings:
    """
    Load settings from root/global.json, then apply environment overrides.
    A missing global.json falls back to defaults.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        logger.warning(f"global.json not found at: {global_path}, using defaults")
        raw: Dict[str, Any] = {}
    else:
        try:
            with global_path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Could not parse {global_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            logger.info(f"Config override from {env_name}")
            raw[key] = value

    defaults = AppSettings()
    settings = AppSettings(
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
        api_base_url=str(raw.get("api_base_url", defaults.api_base_url)).rstrip("/"),
        max_records=_coerce("max_records", raw.get("max_records", defaults.max_records), int),
        request_timeout=_coerce(
            "request_timeout", raw.get("request_timeout", defaults.request_timeout), float
        ),
        max_workers=_coerce("max_workers", raw.get("max_workers", defaults.max_workers), int),
    )

    if settings.max_records <= 0:
        raise ConfigError("max_records must be positive")
    if settings.request_timeout <= 0:
        raise ConfigError("request_timeout must be positive")
    if settings.max_workers <= 0:
        raise ConfigError("max_workers must be positive")

    return settings
