from __future__ import annotations

import logging

from .catalog_parser import MAX_CATALOG_SIZE, IngestResult, PartRecord, ingest_catalog
from .quotation import QuotationLedger
from .search import SearchIndex, SearchOptions, build_index, query


logger = logging.getLogger(__name__)


class IngestionBusy(RuntimeError):
    pass


class PartsSession:
    """Catalog, search index and quotation for one running window.

    The UI owns a single instance. A new upload clears the catalog and the
    quotation up front; only a successful ingest puts a catalog back.
    """

    def __init__(self, search_options: SearchOptions | None = None, max_records: int = MAX_CATALOG_SIZE) -> None:
        self.search_options = search_options or SearchOptions()
        self.max_records = max_records
        self.catalog: list[PartRecord] = []
        self.index: SearchIndex | None = None
        self.quotation = QuotationLedger()
        self.source_name = ""
        self._pending: str | None = None

    @property
    def has_catalog(self) -> bool:
        return bool(self.catalog)

    @property
    def is_loading(self) -> bool:
        return self._pending is not None

    def begin_load(self, filename: str) -> None:
        if self._pending is not None:
            raise IngestionBusy(f"Already loading {self._pending}")
        self._pending = filename
        self._reset()

    def apply_ingest(self, result: IngestResult) -> None:
        self._pending = None
        self.catalog = list(result.records)
        self.source_name = result.source_name
        self.quotation.clear()
        self.rebuild_index()
        logger.info("Catalog replaced from %s (%d parts)", result.source_name, len(self.catalog))

    def apply_failure(self, error: Exception) -> None:
        filename = self._pending or ""
        self._pending = None
        self._reset()
        logger.warning("Catalog load failed for %s: %s", filename, error)

    def load_file(self, filename: str, data: bytes) -> IngestResult:
        self.begin_load(filename)
        try:
            result = ingest_catalog(filename, data, max_records=self.max_records)
        except Exception as exc:
            self.apply_failure(exc)
            raise
        self.apply_ingest(result)
        return result

    def set_search_options(self, options: SearchOptions) -> None:
        self.search_options = options
        if self.catalog:
            self.rebuild_index()

    def rebuild_index(self) -> None:
        self.index = build_index(self.catalog, self.search_options) if self.catalog else None
        logger.info("Search index rebuilt (%d parts)", len(self.catalog))

    def search(self, text: str) -> list[PartRecord] | None:
        return query(self.index, text)

    def _reset(self) -> None:
        self.catalog = []
        self.index = None
        self.source_name = ""
        self.quotation.clear()
