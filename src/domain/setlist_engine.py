"""Song pool and working setlist, with the derived runtime metric."""

from typing import Iterable

from src.domain.model import Song, format_duration


class SetlistEngine:
    """Owns the catalog (pool) and the ordered setlist built from it.

    The pool is keyed by exact title and keeps first-load order. The setlist
    holds references to pool songs, so duplicates of one title are the same
    object repeated.
    """

    def __init__(self):
        self._pool: dict[str, Song] = {}
        self._setlist: list[Song] = []

    # ── Pool ────────────────────────────────────────────────────────

    def add_song(self, song: Song) -> None:
        self._pool[song.title] = song

    def add_songs(self, songs: Iterable[Song]) -> None:
        for song in songs:
            self.add_song(song)

    def get_song_pool(self) -> dict[str, Song]:
        return self._pool

    # ── Setlist ─────────────────────────────────────────────────────

    def get_setlist(self) -> list[Song]:
        return self._setlist

    @property
    def setlist_size(self) -> int:
        return len(self._setlist)

    def add_to_setlist(self, title: str) -> bool:
        """Append the pool song with this exact title. Returns False on a miss."""
        song = self._pool.get(title)
        if song is None:
            return False
        self._setlist.append(song)
        return True

    def remove_from_setlist(self, title: str, case_sensitive: bool = False) -> int:
        """Veto every setlist entry matching title. Returns how many were removed."""
        if case_sensitive:
            def matches(song: Song) -> bool:
                return song.title == title
        else:
            folded = title.casefold()

            def matches(song: Song) -> bool:
                return song.title.casefold() == folded

        before = len(self._setlist)
        self._setlist[:] = [s for s in self._setlist if not matches(s)]
        return before - len(self._setlist)

    def clear_setlist(self) -> None:
        self._setlist.clear()

    def sort_setlist_by_bpm(self) -> None:
        # list.sort is stable: equal-bpm entries keep their current order.
        self._setlist.sort(key=lambda s: s.bpm)

    # ── Derived metrics ─────────────────────────────────────────────

    def get_total_duration(self) -> int:
        return sum(s.duration_seconds for s in self._setlist)

    def total_runtime_label(self) -> str:
        return format_duration(self.get_total_duration())
