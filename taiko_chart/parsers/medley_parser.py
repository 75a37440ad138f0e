"""Medley (.tcm) charts: summary only, playable assembly is not implemented."""

import logging
from pathlib import Path

from taiko_chart.errors import UnsupportedFormatError
from taiko_chart.parsers.difficulty import classify_difficulty
from taiko_chart.parsers.document_reader import read_medley
from taiko_chart.parsers.paths import resolve, root_dir_of
from taiko_chart.schemas.normalized import DifficultyTier, MedleyChartEntry, MedleySummary

logger = logging.getLogger(__name__)


def build_medley_summary(file_path: Path) -> MedleySummary:
    """Decode a medley and classify each chained chart. No course is loaded."""
    file_path = Path(file_path)
    root_dir = root_dir_of(file_path)
    medley = read_medley(file_path)

    charts = [
        MedleyChartEntry(
            path=resolve(root_dir, chart.file),
            difficulty=chart.difficulty,
            tier=classify_difficulty(chart.difficulty),
        )
        for chart in medley.charts
    ]
    return MedleySummary(
        file_path=file_path,
        title=medley.title,
        exams=list(medley.exams),
        charts=charts,
    )


def build_medley_playable(file_path: Path, tier: DifficultyTier):
    """Always raises UnsupportedFormatError once the medley has decoded.

    Raises:
        DecodeError: If the medley document is malformed.
        UnsupportedFormatError: Otherwise.
    """
    summary = build_medley_summary(file_path)
    logger.debug("Medley %s has %d chart(s)", file_path, len(summary.charts))
    raise UnsupportedFormatError(
        f"Playable assembly of medley charts is not supported ({file_path}, {tier.value})"
    )
