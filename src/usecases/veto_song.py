"""Use case: veto the setlist entry selected in the UI."""

import logging

from src.domain.setlist_engine import SetlistEngine

logger = logging.getLogger("setlist_shuffle.usecases.veto")


class VetoSongUseCase:

    def execute(self, engine: SetlistEngine, position: int) -> int:
        """Remove every entry sharing the title at position. Returns the count removed."""
        setlist = engine.get_setlist()
        if not 0 <= position < len(setlist):
            return 0
        title = setlist[position].title
        removed = engine.remove_from_setlist(title)
        logger.info("Vetoed %r (entries removed=%s)", title, removed)
        return removed
