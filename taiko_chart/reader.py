"""Reader facade exposing the Open Taiko Chart loader to a host application."""

import logging
from pathlib import Path

from taiko_chart.errors import UnsupportedFormatError
from taiko_chart.parsers.course_decoder import CourseDecoder, decode_course_raw
from taiko_chart.parsers.info_parser import build_summary
from taiko_chart.parsers.medley_parser import build_medley_playable, build_medley_summary
from taiko_chart.parsers.playable_builder import build_playable
from taiko_chart.schemas.detection import SUPPORTED_EXTENSIONS, ChartFormat, detect_chart_format
from taiko_chart.schemas.normalized import (
    ChartInfo,
    DifficultyTier,
    MedleySummary,
    PlayableSet,
    SelectableSummary,
)

logger = logging.getLogger(__name__)

READER_VERSION = "1.9"


class OpenTaikoChartReader:
    """File reader for Open Taiko Chart rev 2.2 (.tci and .tcm)."""

    name = "OpenTaikoChart"
    creator = ("AioiLight",)
    description = "File reader for Open Taiko Chart."
    version = READER_VERSION

    def __init__(self, course_decoder: CourseDecoder = decode_course_raw):
        self.course_decoder = course_decoder

    def get_extensions(self) -> tuple[str, ...]:
        return SUPPORTED_EXTENSIONS

    def _detect(self, file_path: Path) -> ChartFormat | None:
        try:
            return detect_chart_format(file_path)
        except UnsupportedFormatError:
            logger.debug("Ignoring unsupported file %s", file_path)
            return None

    def get_selectable(self, file_path: Path) -> SelectableSummary | MedleySummary | None:
        """Summary for the song select menu, or None for unsupported extensions."""
        file_path = Path(file_path)
        fmt = self._detect(file_path)
        if fmt is ChartFormat.INFO:
            return build_summary(file_path)
        if fmt is ChartFormat.MEDLEY:
            return build_medley_summary(file_path)
        return None

    def get_playable(
        self, file_path: Path, tier: DifficultyTier
    ) -> tuple[PlayableSet, ChartInfo] | tuple[None, None]:
        """Playables and chart info for *tier*.

        Returns ``(None, None)`` for unsupported extensions or when the chart
        has no course for *tier*. Medleys raise UnsupportedFormatError.
        """
        file_path = Path(file_path)
        fmt = self._detect(file_path)
        if fmt is ChartFormat.INFO:
            return build_playable(file_path, tier, self.course_decoder)
        if fmt is ChartFormat.MEDLEY:
            return build_medley_playable(file_path, tier)
        return None, None
