"""Use case: append the current setlist to the catalog file."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.domain.errors import CatalogError
from src.domain.ports import CatalogPort
from src.domain.setlist_engine import SetlistEngine

logger = logging.getLogger("setlist_shuffle.usecases.save")


@dataclass
class SaveSetlistOutcome:
    path: str = ""
    count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SaveSetlistUseCase:

    def __init__(self, catalog: CatalogPort):
        self.catalog = catalog

    def execute(self, engine: SetlistEngine, saved_at: Optional[datetime] = None) -> SaveSetlistOutcome:
        songs = list(engine.get_setlist())
        try:
            path = self.catalog.append_setlist(songs, saved_at or datetime.now())
        except CatalogError as exc:
            logger.exception("Setlist save failed")
            return SaveSetlistOutcome(count=len(songs), error=str(exc))
        return SaveSetlistOutcome(path=path, count=len(songs))
