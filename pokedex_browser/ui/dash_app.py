from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from pokedex_browser.config.config_loader import load_settings
from pokedex_browser.services.catalog_service import CatalogService
from pokedex_browser.services.pokeapi_client import PokeApiClient
from pokedex_browser.ui.layout.build_layout import build_layout
from pokedex_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from pokedex_browser.ui.callbacks.callbacks_render import register_render_callbacks
from pokedex_browser.ui.callbacks.callbacks_sync import register_sync_callbacks
from pokedex_browser.ui.callbacks.callbacks_theme import register_theme_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
        config_root: Path | str = Path("config"),
        catalog: CatalogService | None = None,
) -> Dash:
    # 1) Load Config
    settings = load_settings(Path(config_root))

    # 2) Initialize Service Layer
    if catalog is None:
        client = PokeApiClient(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            max_workers=settings.max_workers,
        )
        catalog = CatalogService(client, max_records=settings.max_records)

    # 3) App Context
    ctx = AppConfig(settings=settings, catalog=catalog)
    ctx.validate()

    # 4) Kick off ingestion; the UI polls until it settles
    catalog.start()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_filter_callbacks(app, ctx)
    register_theme_callbacks(app, ctx)

    logger.info("Dash app created", extra={"ui_title": settings.ui_title})
    return app
