"""Load the course bodies behind one course reference."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from taiko_chart.errors import MissingCourseFileError
from taiko_chart.parsers.document_reader import read_course
from taiko_chart.parsers.paths import resolve
from taiko_chart.schemas.documents import CourseBody, CourseReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssembledCourse:
    """Single-player body plus the multiplayer bodies in listed order."""

    single: CourseBody
    multiple: tuple[CourseBody, ...] = field(default_factory=tuple)

    def bodies(self) -> Iterator[CourseBody]:
        yield self.single
        yield from self.multiple


def single_course_exists(root_dir: Path, reference: CourseReference) -> bool:
    path = resolve(root_dir, reference.single)
    return path is not None and path.is_file()


def assemble_course(root_dir: Path, reference: CourseReference) -> AssembledCourse:
    """Decode every body a course reference points at.

    Raises:
        MissingCourseFileError: If the single-player file does not exist.
        DecodeError: If any referenced file is unreadable or malformed.
    """
    single_path = resolve(root_dir, reference.single)
    if not single_path.is_file():
        raise MissingCourseFileError(single_path)
    single = read_course(single_path)

    multiple: list[CourseBody] = []
    for rel in reference.multiple or ():
        multiple.append(read_course(resolve(root_dir, rel)))

    logger.debug(
        "Assembled %s course from %s (+%d multiplayer)",
        reference.difficulty, single_path, len(multiple),
    )
    return AssembledCourse(single=single, multiple=tuple(multiple))
