"""
Service layer: the PokéAPI data source and the catalog ingestion service.
"""

from .catalog_service import CatalogService
from .pokeapi_client import PokeApiClient

__all__ = ["CatalogService", "PokeApiClient"]
