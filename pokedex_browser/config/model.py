from __future__ import annotations

from dataclasses import dataclass

DEFAULT_API_BASE_URL = "https://pokeapi.co/api/v2"


@dataclass(frozen=True)
class AppSettings:
    """
    Parsed application settings.

    - max_records: size of the catalog fetched at start-up (the API has ~1300
      entries, fetching all details at once is too slow for a page load).
    - request_timeout: seconds, applied to every HTTP request.
    - max_workers: bound on concurrent detail fetches.
    """
    ui_title: str = "Pokédex"
    subtitle: str = "Browse, filter and page through PokéAPI"
    api_base_url: str = DEFAULT_API_BASE_URL
    max_records: int = 200
    request_timeout: float = 10.0
    max_workers: int = 8
