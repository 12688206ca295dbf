from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

from pokedex_browser.core.exceptions import FetchError
from pokedex_browser.core.filter_state import PAGE_SIZE
from pokedex_browser.core.record import Record
from pokedex_browser.core.view_model import ViewModel
from pokedex_browser.services.pokeapi_client import PokeApiClient

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Server-side holder of the ingested record set and type list.

    `start()` launches the two ingestion fetches as independent one-shot
    tasks. Each writes its own slot; the first failure latches the error
    message and any result arriving after that is never consulted.

    The per-session filter/page state lives in the browser, so callers get a
    fresh ViewModel per request via `view_model()`.
    """

    def __init__(self, client: PokeApiClient, max_records: int, page_size: int = PAGE_SIZE):
        self._client = client
        self._max_records = max_records
        self._page_size = page_size

        self._lock = threading.Lock()
        self._records: Optional[Tuple[Record, ...]] = None
        self._type_names: Optional[Tuple[str, ...]] = None
        self._error: Optional[str] = None

        self._executor: Optional[ThreadPoolExecutor] = None
        self._futures: List[Future] = []
        self._records_done = threading.Event()
        self._types_done = threading.Event()

    @property
    def started(self) -> bool:
        return self._executor is not None

    def start(self) -> None:
        if self.started:
            return

        logger.info("Starting catalog ingestion", extra={"max_records": self._max_records})
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="catalog")

        records_future = self._executor.submit(self._client.fetch_catalog, self._max_records)
        records_future.add_done_callback(self._on_records_done)

        types_future = self._executor.submit(self._client.fetch_type_list)
        types_future.add_done_callback(self._on_types_done)

        self._futures = [records_future, types_future]
        self._executor.shutdown(wait=False)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until both completion handlers have run (tests, scripts).
        Returns False on timeout. `timeout` applies to each task separately.
        """
        if not self.started:
            return False
        return self._records_done.wait(timeout) and self._types_done.wait(timeout)

    # ------------------------------------------------------------------
    # Task completion
    # ------------------------------------------------------------------
    def _failure(self, future: Future, what: str) -> Optional[str]:
        exc = future.exception()
        if exc is None:
            return None
        if isinstance(exc, FetchError):
            logger.error(f"Failed to load {what}", extra={"error": str(exc)})
            return str(exc)
        logger.error(f"Unexpected error while loading {what}", exc_info=exc)
        return f"Failed to load {what}."

    def _on_records_done(self, future: Future) -> None:
        try:
            message = self._failure(future, "Pokémon list")
            with self._lock:
                if self._error is not None:
                    return
                if message is not None:
                    self._error = message
                    return
                self._records = future.result()
            logger.info("Record set ingested", extra={"n_records": len(self._records)})
        finally:
            self._records_done.set()

    def _on_types_done(self, future: Future) -> None:
        try:
            message = self._failure(future, "type list")
            with self._lock:
                if self._error is not None:
                    return
                if message is not None:
                    self._error = message
                    return
                self._type_names = tuple(future.result())
            logger.info("Type list ingested", extra={"n_types": len(self._type_names)})
        finally:
            self._types_done.set()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    @property
    def settled(self) -> bool:
        """True once the view can no longer change: loaded or failed."""
        with self._lock:
            return self._error is not None or (
                self._records is not None and self._type_names is not None
            )

    def view_model(self) -> ViewModel:
        vm = ViewModel(page_size=self._page_size)
        with self._lock:
            if self._error is not None:
                vm.fail(self._error)
                return vm
            if self._records is not None:
                vm.ingest_records(self._records)
            if self._type_names is not None:
                vm.ingest_types(self._type_names)
        return vm
