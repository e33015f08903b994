"""Use case: populate the song pool from the catalog file."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.domain.errors import CatalogError
from src.domain.model import SkippedLine
from src.domain.ports import CatalogPort
from src.domain.setlist_engine import SetlistEngine

logger = logging.getLogger("setlist_shuffle.usecases.load")


@dataclass
class LoadCatalogOutcome:
    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LoadCatalogUseCase:

    def __init__(self, catalog: CatalogPort):
        self.catalog = catalog

    def execute(self, engine: SetlistEngine) -> LoadCatalogOutcome:
        """Load every valid row into the pool. A failed read leaves the pool as it was."""
        try:
            result = self.catalog.load()
        except CatalogError as exc:
            logger.exception("Catalog load failed")
            return LoadCatalogOutcome(error=str(exc))

        engine.add_songs(result.songs)
        return LoadCatalogOutcome(loaded=len(result.songs), skipped=result.skipped)
