from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple, Type

import requests

from pokedex_browser.config.model import DEFAULT_API_BASE_URL
from pokedex_browser.core.exceptions import DetailFetchError, FetchError, ListFetchError
from pokedex_browser.core.record import Record

logger = logging.getLogger(__name__)

USER_AGENT = "PokedexBrowser/1.0"


class PokeApiClient:
    """
    Thin client for the PokéAPI endpoints the browser needs.

    Every failure (transport error, non-2xx status, undecodable body) is
    mapped onto ListFetchError for list endpoints and DetailFetchError for
    per-record lookups. There is no retry.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 10.0,
        max_workers: int = 8,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_workers = max_workers
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})

    def _get_json(self, url: str, error_cls: Type[FetchError], **params: Any) -> Dict[str, Any]:
        try:
            resp = self._session.get(url, params=params or None, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise error_cls(f"Request to {url} failed with status {status}") from e
        except requests.JSONDecodeError as e:
            raise error_cls(f"Response from {url} was not valid JSON") from e
        except requests.RequestException as e:
            raise error_cls(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise error_cls(f"Response from {url} was not valid JSON") from e

    # ------------------------------------------------------------------
    # DataSource operations
    # ------------------------------------------------------------------
    def fetch_type_list(self) -> List[str]:
        data = self._get_json(f"{self.base_url}/type", ListFetchError)
        return [item["name"] for item in data.get("results", []) if item.get("name")]

    def fetch_record_page(self, limit: int, offset: int = 0) -> List[str]:
        """Return the detail URLs for one page of the Pokémon list."""
        data = self._get_json(
            f"{self.base_url}/pokemon", ListFetchError, limit=limit, offset=offset
        )
        return [item["url"] for item in data.get("results", []) if item.get("url")]

    def fetch_record_detail(self, url: str) -> Record:
        return Record.from_api(self._get_json(url, DetailFetchError))

    def fetch_catalog(self, limit: int) -> Tuple[Record, ...]:
        """
        Fetch the first `limit` records. Detail requests run concurrently and
        the result keeps list order; a single failed detail fails the batch.
        """
        urls = self.fetch_record_page(limit=limit, offset=0)
        logger.info("Fetching record details", extra={"n_records": len(urls)})

        if not urls:
            return ()

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(urls))) as pool:
            # map() re-raises the first failure when its result is consumed
            return tuple(pool.map(self.fetch_record_detail, urls))

    def close(self) -> None:
        self._session.close()
