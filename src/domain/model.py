"""Pure domain objects — no framework dependency."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Song:
    title: str
    index_number: int
    bpm: int
    duration_seconds: int
    key: str
    danceability: int
    happy: int
    sad: int
    relaxed: int
    aggressiveness: int
    notes: str = ""

    @classmethod
    def quick(
        cls,
        title: str,
        bpm: int,
        danceability: int,
        aggressiveness: int,
        duration_seconds: int,
    ) -> "Song":
        """Build a song from the handful of fields used for manual testing."""
        return cls(
            title=title,
            index_number=0,
            bpm=bpm,
            duration_seconds=duration_seconds,
            key="C major",
            danceability=danceability,
            happy=50,
            sad=50,
            relaxed=50,
            aggressiveness=aggressiveness,
            notes="",
        )

    def __str__(self) -> str:
        return f"{self.title} ({self.bpm} BPM, {self.duration_seconds}s, Key: {self.key})"


@dataclass
class SkippedLine:
    line_number: int
    text: str
    reason: str


@dataclass
class CatalogLoadResult:
    songs: list[Song] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)


def format_duration(total_seconds: int) -> str:
    """Render seconds as m:ss (225 -> "3:45")."""
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def parse_duration(text: str) -> int:
    """Parse "mm:ss" into total seconds. Raises ValueError on any other shape."""
    parts = text.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"invalid duration {text!r}, expected mm:ss")
    minutes, seconds = (int(p) for p in parts)
    return minutes * 60 + seconds
