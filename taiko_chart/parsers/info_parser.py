"""Build the selectable (song select) summary of a .tci chart."""

import logging
from pathlib import Path

from taiko_chart.parsers.course_assembler import assemble_course, single_course_exists
from taiko_chart.parsers.difficulty import classify_difficulty
from taiko_chart.parsers.document_reader import read_info
from taiko_chart.parsers.paths import resolve, root_dir_of
from taiko_chart.schemas.normalized import DifficultyEntry, SelectableSummary

logger = logging.getLogger(__name__)


def build_summary(file_path: Path) -> SelectableSummary:
    """Build the SelectableSummary for the chart info document at *file_path*.

    Course references whose single-player file is missing are skipped.
    The remaining references are fully decoded so that broken course files
    surface here rather than at play time. When several references classify
    to the same tier the last one wins.

    Raises:
        DecodeError: If the info document or any present course file is malformed.
    """
    file_path = Path(file_path)
    root_dir = root_dir_of(file_path)
    info = read_info(file_path)

    summary = SelectableSummary(
        file_path=file_path,
        title=info.title,
        subtitle=info.subtitle,
        bpm=info.bpm,
        artist=info.artist,
        creator=info.creator,
        preview_song=resolve(root_dir, info.audio),
        song_preview_time=info.songpreview,
        albumart_path=resolve(root_dir, info.albumart),
        background_path=resolve(root_dir, info.background),
    )

    for reference in info.courses:
        if not single_course_exists(root_dir, reference):
            logger.warning(
                "Missing course file: %s (skipping %s)",
                resolve(root_dir, reference.single), reference.difficulty,
            )
            continue
        assemble_course(root_dir, reference)

        tier = classify_difficulty(reference.difficulty)
        summary.courses[tier] = DifficultyEntry(level=reference.level)

    logger.debug("Summary for %s: %d tiers", file_path, len(summary.courses))
    return summary
