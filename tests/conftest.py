"""Shared in-memory adapters and fixtures for all bounded contexts."""

from datetime import datetime
from types import SimpleNamespace
from typing import Optional

import pytest

from src.domain.errors import CatalogReadError, CatalogWriteError
from src.domain.model import CatalogLoadResult, SkippedLine, Song
from src.domain.ports import CatalogPort
from src.domain.setlist_engine import SetlistEngine


# ── In-memory adapters ──────────────────────────────────────────────


class InMemoryCatalog(CatalogPort):
    def __init__(
        self,
        songs: Optional[list[Song]] = None,
        skipped: Optional[list[SkippedLine]] = None,
        fail_read: bool = False,
        fail_write: bool = False,
    ):
        self._songs = list(songs or [])
        self._skipped = list(skipped or [])
        self.fail_read = fail_read
        self.fail_write = fail_write
        self.snapshots: list[tuple[datetime, list[Song]]] = []

    def load(self) -> CatalogLoadResult:
        if self.fail_read:
            raise CatalogReadError("could not read memory://catalog: missing")
        return CatalogLoadResult(songs=list(self._songs), skipped=list(self._skipped))

    def append_setlist(self, songs: list[Song], saved_at: datetime) -> str:
        if self.fail_write:
            raise CatalogWriteError("could not write memory://catalog: disk full")
        self.snapshots.append((saved_at, list(songs)))
        return "memory://catalog"


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def anthem():
    return Song(
        title="Anthem", index_number=1, bpm=120, duration_seconds=225, key="C major",
        danceability=80, happy=70, sad=10, relaxed=30, aggressiveness=20, notes="Great opener",
    )


@pytest.fixture
def ballad():
    return Song.quick("Slow Burn", bpm=72, danceability=30, aggressiveness=5, duration_seconds=260)


@pytest.fixture
def rocker():
    return Song.quick("Overdrive", bpm=150, danceability=60, aggressiveness=90, duration_seconds=190)


@pytest.fixture
def catalog_songs(anthem, ballad, rocker):
    return [anthem, ballad, rocker]


@pytest.fixture
def engine(catalog_songs):
    e = SetlistEngine()
    e.add_songs(catalog_songs)
    return e


@pytest.fixture
def catalog(catalog_songs):
    return InMemoryCatalog(songs=catalog_songs)


CATALOG_HEADER = "Title,Index,BPM,Duration,Key,Danceability,Happy,Sad,Relaxed,Aggressiveness,Notes"


@pytest.fixture
def write_catalog(tmp_path):
    """Write catalog lines (header added) to a temp file and return its path."""
    def _write(*lines: str, header: str = CATALOG_HEADER) -> str:
        path = tmp_path / "catalog.csv"
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def make_catalog():
    return InMemoryCatalog


class DummyPage:
    def __init__(self):
        self.overlay = []
        self.controls = []
        self.window = SimpleNamespace(width=0, height=0, close=lambda: None)
        self.title = ""
        self.bgcolor = None
        self.updates = 0

    def add(self, *controls):
        self.controls.extend(controls)

    def update(self):
        self.updates += 1


@pytest.fixture
def page():
    return DummyPage()
