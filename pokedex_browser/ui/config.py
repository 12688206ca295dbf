from dataclasses import dataclass
from typing import Optional

from pokedex_browser.config.model import AppSettings
from pokedex_browser.services.catalog_service import CatalogService


@dataclass
class AppConfig:
    settings: AppSettings
    catalog: Optional[CatalogService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.catalog is None:
            raise RuntimeError("AppConfig.catalog must be initialized.")
