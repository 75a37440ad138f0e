"""Course decoder contract and the built-in passthrough decoder.

A course decoder turns the chart info document and one course body into
whatever playable representation the host engine consumes::

    decoder(info: ChartInfoDocument, course: CourseBody) -> Playable

Hosts with a note/timing engine inject their own decoder. The default
below keeps the raw measures untouched so the loader can be used (and
inspected from the CLI) without one.
"""

from dataclasses import dataclass
from typing import Any, Callable

from taiko_chart.schemas.documents import ChartInfoDocument, CourseBody

CourseDecoder = Callable[[ChartInfoDocument, CourseBody], Any]


@dataclass(frozen=True)
class RawPlayable:
    """Untimed course data as handed to a gameplay engine."""

    bpm: float | None
    offset: float | None
    scoreinit: int | None
    scorediff: int | None
    scoreshinuchi: int | None
    balloon: tuple[int | None, ...]
    measures: tuple[tuple[str, ...], ...]

    @property
    def measure_count(self) -> int:
        return len(self.measures)

    @property
    def note_token_count(self) -> int:
        return sum(len(m) for m in self.measures)


def decode_course_raw(info: ChartInfoDocument, course: CourseBody) -> RawPlayable:
    return RawPlayable(
        bpm=info.bpm,
        offset=info.offset,
        scoreinit=course.scoreinit,
        scorediff=course.scorediff,
        scoreshinuchi=course.scoreshinuchi,
        balloon=course.balloon or (),
        measures=course.measures,
    )
