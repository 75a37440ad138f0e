"""Normalized Open Taiko Chart output structures.

Dataclasses that give the host a uniform shape regardless of the on-disk
layout: a lightweight selectable summary for song browsing and a playable
set plus chart info block for gameplay.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator


class DifficultyTier(str, Enum):
    """The five fixed course tiers a host can select."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    ONI = "oni"
    EDIT = "edit"

    @classmethod
    def from_label(cls, label: str | None) -> "DifficultyTier":
        from taiko_chart.parsers.difficulty import classify_difficulty

        return classify_difficulty(label)

    @classmethod
    def parse_name(cls, name: str) -> "DifficultyTier":
        """Strict, case-insensitive lookup used by the CLI (no fallback)."""
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown difficulty {name!r}; expected one of: {valid}") from None


@dataclass(frozen=True)
class DifficultyEntry:
    """Per-tier data shown in the song select menu."""

    level: int | None = None


@dataclass
class SelectableSummary:
    """Menu-browsing view of one .tci chart."""

    file_path: Path
    title: str | None = None
    subtitle: str | None = None
    bpm: float | None = None
    artist: tuple[str, ...] | None = None
    creator: tuple[str, ...] | None = None
    preview_song: Path | None = None  # resolved "audio"
    song_preview_time: float | None = None
    albumart_path: Path | None = None
    background_path: Path | None = None
    courses: dict[DifficultyTier, DifficultyEntry] = field(default_factory=dict)

    def __getitem__(self, tier: DifficultyTier) -> DifficultyEntry:
        return self.courses[tier]

    def __contains__(self, tier: object) -> bool:
        return tier in self.courses


@dataclass
class ChartInfo:
    """Chart metadata for the gameplay engine.

    Every field is a list with one slot per song. Single-song charts always
    have exactly one slot; the lists exist so that medleys can later carry one
    slot per chained song. Absent values are ``None`` entries.
    """

    title: list[str | None] = field(default_factory=lambda: [None])
    subtitle: list[str | None] = field(default_factory=lambda: [None])
    artist: list[tuple[str, ...] | None] = field(default_factory=lambda: [None])
    creator: list[tuple[str, ...] | None] = field(default_factory=lambda: [None])
    audio: list[Path | None] = field(default_factory=lambda: [None])
    background: list[Path | None] = field(default_factory=lambda: [None])
    movieoffset: list[float | None] = field(default_factory=lambda: [None])
    bpm: list[float | None] = field(default_factory=lambda: [None])
    offset: list[float | None] = field(default_factory=lambda: [None])

    @property
    def song_count(self) -> int:
        return len(self.title)


@dataclass
class PlayableSet:
    """Decoded playables for one tier: single player first, then multiplayer."""

    tier: DifficultyTier
    playables: list[Any] = field(default_factory=list)

    @property
    def single(self) -> Any:
        return self.playables[0]

    @property
    def multiple(self) -> list[Any]:
        return self.playables[1:]

    def __len__(self) -> int:
        return len(self.playables)

    def __getitem__(self, index: int) -> Any:
        return self.playables[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.playables)


@dataclass(frozen=True)
class MedleyChartEntry:
    """One chained chart of a medley, resolved against the medley directory."""

    path: Path | None
    difficulty: str | None
    tier: DifficultyTier


@dataclass
class MedleySummary:
    """Menu-browsing view of one .tcm medley."""

    file_path: Path
    title: str | None = None
    exams: list = field(default_factory=list)  # MedleyExam
    charts: list[MedleyChartEntry] = field(default_factory=list)
