"""Typed Open Taiko Chart documents and their decoding from parsed JSON.

Three document families exist on disk:

* the chart info document (``.tci``) with song metadata and course references,
* course documents (plain ``.json``) holding scoring data and raw measures,
* the medley document (``.tcm``) chaining several charts.

Keys are matched case-insensitively and unknown keys are ignored. Every
optional field decodes to ``None`` when absent or ``null``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from taiko_chart.errors import DecodeError


@dataclass(frozen=True)
class CourseReference:
    """One ``courses`` entry of a chart info document."""

    difficulty: str | None
    level: int | None
    single: str
    multiple: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ChartInfoDocument:
    """Root ``.tci`` document. Path fields are relative to its directory."""

    title: str | None = None
    subtitle: str | None = None
    artist: tuple[str, ...] | None = None
    creator: tuple[str, ...] | None = None
    audio: str | None = None
    background: str | None = None
    movieoffset: float | None = None
    bpm: float | None = None
    offset: float | None = None
    songpreview: float | None = None
    albumart: str | None = None
    courses: tuple[CourseReference, ...] = ()


@dataclass(frozen=True)
class CourseBody:
    """One course document. Measures are raw note-token strings."""

    scoreinit: int | None = None
    scorediff: int | None = None
    scoreshinuchi: int | None = None
    balloon: tuple[int | None, ...] | None = None
    measures: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class MedleyExam:
    type: str | None = None
    range: str | None = None
    value: tuple[int, ...] | None = None


@dataclass(frozen=True)
class MedleyChart:
    file: str | None = None
    difficulty: str | None = None


@dataclass(frozen=True)
class MedleyDocument:
    """Root ``.tcm`` document."""

    title: str | None = None
    exams: tuple[MedleyExam, ...] = ()
    charts: tuple[MedleyChart, ...] = ()


# --- Field readers -------------------------------------------------------------

# Integer fields are 32-bit signed on every engine that reads the format.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def _as_int(value: Any) -> int | None:
    """Return *value* as an in-range int, or None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not INT_MIN <= value <= INT_MAX:
        return None
    return value


class _Fields:
    """Case-insensitive view over one JSON object, reporting shape errors."""

    def __init__(self, data: Any, path: Path, where: str):
        if not isinstance(data, dict):
            raise DecodeError(path, f"{where} must be a JSON object, got {type(data).__name__}")
        self._data = {str(k).lower(): v for k, v in data.items()}
        self._path = path
        self._where = where

    def error(self, key: str, expected: str, value: Any) -> DecodeError:
        return DecodeError(
            self._path,
            f"{self._where}.{key} must be {expected}, got {type(value).__name__}",
        )

    def string(self, key: str, required: bool = False) -> str | None:
        value = self._data.get(key)
        if value is None:
            if required:
                raise DecodeError(self._path, f"{self._where}.{key} is required")
            return None
        if not isinstance(value, str):
            raise self.error(key, "a string", value)
        return value

    def number(self, key: str) -> float | None:
        value = self._data.get(key)
        if value is None:
            return None
        # bool is an int subclass but never a valid number here
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.error(key, "a number", value)
        try:
            return float(value)
        except OverflowError as exc:
            raise self.error(key, "a finite number", value) from exc

    def integer(self, key: str) -> int | None:
        value = self._data.get(key)
        if value is None:
            return None
        result = _as_int(value)
        if result is None:
            raise self.error(key, "a 32-bit integer", value)
        return result

    def array(self, key: str) -> list | None:
        value = self._data.get(key)
        if value is None:
            return None
        if not isinstance(value, list):
            raise self.error(key, "an array", value)
        return value

    def strings(self, key: str) -> tuple[str, ...] | None:
        values = self.array(key)
        if values is None:
            return None
        for i, item in enumerate(values):
            if not isinstance(item, str):
                raise self.error(f"{key}[{i}]", "a string", item)
        return tuple(values)


def _integers(values: list, fields: _Fields, key: str, nullable: bool) -> tuple:
    result = []
    for i, item in enumerate(values):
        if item is None and nullable:
            result.append(None)
            continue
        number = _as_int(item)
        if number is None:
            raise fields.error(f"{key}[{i}]", "a 32-bit integer", item)
        result.append(number)
    return tuple(result)


# --- Public decoders -----------------------------------------------------------


def decode_course_reference(data: Any, path: Path, index: int = 0) -> CourseReference:
    f = _Fields(data, path, f"courses[{index}]")
    return CourseReference(
        difficulty=f.string("difficulty"),
        level=f.integer("level"),
        single=f.string("single", required=True),
        multiple=f.strings("multiple"),
    )


def decode_info(data: Any, path: Path) -> ChartInfoDocument:
    """Decode a parsed ``.tci`` document."""
    f = _Fields(data, path, "info")
    raw_courses = f.array("courses") or []
    return ChartInfoDocument(
        title=f.string("title"),
        subtitle=f.string("subtitle"),
        artist=f.strings("artist"),
        creator=f.strings("creator"),
        audio=f.string("audio"),
        background=f.string("background"),
        movieoffset=f.number("movieoffset"),
        bpm=f.number("bpm"),
        offset=f.number("offset"),
        songpreview=f.number("songpreview"),
        albumart=f.string("albumart"),
        courses=tuple(
            decode_course_reference(item, path, i) for i, item in enumerate(raw_courses)
        ),
    )


def decode_course(data: Any, path: Path) -> CourseBody:
    """Decode a parsed course document. Note tokens are kept as-is."""
    f = _Fields(data, path, "course")

    balloon = f.array("balloon")
    measures: list[tuple[str, ...]] = []
    for i, measure in enumerate(f.array("measures") or []):
        if not isinstance(measure, list):
            raise f.error(f"measures[{i}]", "an array", measure)
        for j, token in enumerate(measure):
            if not isinstance(token, str):
                raise f.error(f"measures[{i}][{j}]", "a string", token)
        measures.append(tuple(measure))

    return CourseBody(
        scoreinit=f.integer("scoreinit"),
        scorediff=f.integer("scorediff"),
        scoreshinuchi=f.integer("scoreshinuchi"),
        balloon=_integers(balloon, f, "balloon", nullable=True) if balloon is not None else None,
        measures=tuple(measures),
    )


def decode_medley(data: Any, path: Path) -> MedleyDocument:
    """Decode a parsed ``.tcm`` document."""
    f = _Fields(data, path, "medley")

    exams = []
    for i, item in enumerate(f.array("exams") or []):
        ef = _Fields(item, path, f"exams[{i}]")
        value = ef.array("value")
        exams.append(MedleyExam(
            type=ef.string("type"),
            range=ef.string("range"),
            value=_integers(value, ef, "value", nullable=False) if value is not None else None,
        ))

    charts = []
    for i, item in enumerate(f.array("charts") or []):
        cf = _Fields(item, path, f"charts[{i}]")
        charts.append(MedleyChart(file=cf.string("file"), difficulty=cf.string("difficulty")))

    return MedleyDocument(title=f.string("title"), exams=tuple(exams), charts=tuple(charts))
