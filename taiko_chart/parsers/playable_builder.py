"""Assemble the playable set and chart info for one tier of a .tci chart."""

import logging
from pathlib import Path

from taiko_chart.parsers.course_assembler import assemble_course, single_course_exists
from taiko_chart.parsers.course_decoder import CourseDecoder, decode_course_raw
from taiko_chart.parsers.difficulty import classify_difficulty
from taiko_chart.parsers.document_reader import read_info
from taiko_chart.parsers.paths import resolve, root_dir_of
from taiko_chart.schemas.documents import ChartInfoDocument
from taiko_chart.schemas.normalized import ChartInfo, DifficultyTier, PlayableSet

logger = logging.getLogger(__name__)


def build_chart_info(info: ChartInfoDocument, root_dir: Path) -> ChartInfo:
    """Wrap each info field in a one-slot list, resolving audio and background."""
    return ChartInfo(
        title=[info.title],
        subtitle=[info.subtitle],
        artist=[info.artist],
        creator=[info.creator],
        audio=[resolve(root_dir, info.audio)],
        background=[resolve(root_dir, info.background)],
        movieoffset=[info.movieoffset],
        bpm=[info.bpm],
        offset=[info.offset],
    )


def build_playable(
    file_path: Path,
    tier: DifficultyTier,
    course_decoder: CourseDecoder = decode_course_raw,
) -> tuple[PlayableSet, ChartInfo] | tuple[None, None]:
    """Build the playables for *tier* of the chart at *file_path*.

    Only the first course reference classifying to *tier* is used; later
    duplicates are ignored. References whose single-player file is missing
    are skipped, as in the summary. Returns ``(None, None)`` when no usable
    reference matches. Any decode or course decoder failure propagates.
    """
    file_path = Path(file_path)
    root_dir = root_dir_of(file_path)
    info = read_info(file_path)

    usable = []
    for reference in info.courses:
        if classify_difficulty(reference.difficulty) != tier:
            continue
        if not single_course_exists(root_dir, reference):
            logger.warning(
                "Missing course file: %s (skipping %s)",
                resolve(root_dir, reference.single), reference.difficulty,
            )
            continue
        usable.append(reference)

    if not usable:
        logger.debug("No %s course in %s", tier.value, file_path)
        return None, None

    course = assemble_course(root_dir, usable[0])
    playables = [course_decoder(info, body) for body in course.bodies()]

    logger.info(
        "Loaded %s %s: %d playable(s)", file_path.name, tier.value, len(playables)
    )
    return PlayableSet(tier=tier, playables=playables), build_chart_info(info, root_dir)
