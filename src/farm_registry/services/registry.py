"""In-memory snapshot of the farmer registry."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional, Sequence

from ..data import farmers_repository
from ..models.domain import FarmerRecord
from .filters import sort_by_created_desc
from .normalizer import normalize_documents


class RegistryLoadError(RuntimeError):
    """The registry could not be loaded from the document store."""


class FarmerRegistry:
    """Holds the last successfully loaded, normalized set of farmer records."""

    def __init__(self, fetch: Optional[Callable[[], Sequence[Any]]] = None) -> None:
        self._fetch = fetch
        self._records: tuple[FarmerRecord, ...] = ()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def records(self) -> tuple[FarmerRecord, ...]:
        """Return the current snapshot, loading it on first use."""

        if not self._loaded:
            self.refresh()
        return self._records

    def snapshot(self) -> tuple[FarmerRecord, ...]:
        """Return the current snapshot without touching the store."""

        return self._records

    def refresh(self) -> tuple[FarmerRecord, ...]:
        fetch = self._fetch or farmers_repository.fetch_farmer_documents
        try:
            documents = fetch()
        except Exception as exc:
            logging.error(f"Failed to load farmer registry, keeping {len(self._records)} cached records: {exc}")
            raise RegistryLoadError("could not load registry") from exc

        records = sort_by_created_desc(normalize_documents(documents))
        self._records = tuple(records)
        self._loaded = True
        logging.info(f"Loaded farmer registry with {len(records)} records")
        return self._records

    def find(self, farmer_id: str) -> Optional[FarmerRecord]:
        for record in self.records():
            if record.id == farmer_id:
                return record
        return None


@functools.lru_cache(maxsize=1)
def get_registry() -> FarmerRegistry:
    """Process-wide registry instance."""

    return FarmerRegistry()
