"""CSV catalog adapter: read the song catalog, append setlist snapshots."""

import csv
import logging
from datetime import datetime

from src.config import (
    CATALOG_ENCODING,
    CATALOG_MIN_FIELDS,
    SAVE_MARKER,
    SAVE_TIMESTAMP_FORMAT,
)
from src.domain.errors import CatalogReadError, CatalogWriteError
from src.domain.model import CatalogLoadResult, SkippedLine, Song, format_duration, parse_duration
from src.domain.ports import CatalogPort

logger = logging.getLogger("setlist_shuffle.catalog")


def parse_row(fields: list[str]) -> Song:
    """Map one catalog row to a Song.

    Column 1 (the file's index column) is not carried over; loaded songs get
    index_number 0. Raises ValueError when a numeric or duration field is
    malformed.
    """
    return Song(
        title=fields[0].strip(),
        index_number=0,
        bpm=int(fields[2]),
        duration_seconds=parse_duration(fields[3]),
        key=fields[4].strip(),
        danceability=int(fields[5]),
        happy=int(fields[6]),
        sad=int(fields[7]),
        relaxed=int(fields[8]),
        aggressiveness=int(fields[9]),
        notes=fields[10].strip() if len(fields) > 10 else "",
    )


def song_to_row(song: Song) -> list:
    return [
        song.title,
        song.index_number,
        song.bpm,
        format_duration(song.duration_seconds),
        song.key,
        song.danceability,
        song.happy,
        song.sad,
        song.relaxed,
        song.aggressiveness,
        song.notes,
    ]


class CsvCatalogAdapter(CatalogPort):

    def __init__(self, path: str):
        self.path = path

    def load(self) -> CatalogLoadResult:
        result = CatalogLoadResult()
        try:
            with open(self.path, "r", encoding=CATALOG_ENCODING) as f:
                for line_number, line in enumerate(f, start=1):
                    if line_number == 1:
                        continue  # header
                    self._load_line(line.rstrip("\r\n"), line_number, result)
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogReadError(f"could not read {self.path}: {exc}") from exc

        logger.info(
            "Catalog loaded from %s (songs=%s skipped=%s)",
            self.path, len(result.songs), len(result.skipped),
        )
        return result

    @staticmethod
    def _load_line(line: str, line_number: int, result: CatalogLoadResult) -> None:
        # Each physical line is tokenised alone so a stray quote cannot swallow the lines after it.
        try:
            row = next(csv.reader([line]), [])
        except csv.Error as exc:
            logger.warning("Skipping unreadable line %s: %s", line_number, exc)
            result.skipped.append(SkippedLine(line_number, line, str(exc)))
            return
        if len(row) < CATALOG_MIN_FIELDS:
            reason = f"expected at least {CATALOG_MIN_FIELDS} fields, got {len(row)}"
            logger.debug("Skipping line %s: %s", line_number, reason)
            result.skipped.append(SkippedLine(line_number, line, reason))
            return
        try:
            song = parse_row(row)
        except ValueError as exc:
            logger.warning("Skipping malformed line %s: %s", line_number, exc)
            result.skipped.append(SkippedLine(line_number, line, str(exc)))
            return
        result.songs.append(song)

    def append_setlist(self, songs: list[Song], saved_at: datetime) -> str:
        marker = SAVE_MARKER.format(timestamp=saved_at.strftime(SAVE_TIMESTAMP_FORMAT))
        try:
            with open(self.path, "a", newline="", encoding=CATALOG_ENCODING) as f:
                f.write(marker)
                writer = csv.writer(f, lineterminator="\n")
                for song in songs:
                    writer.writerow(song_to_row(song))
        except OSError as exc:
            raise CatalogWriteError(f"could not write {self.path}: {exc}") from exc

        logger.info("Setlist appended to %s (entries=%s)", self.path, len(songs))
        return self.path
