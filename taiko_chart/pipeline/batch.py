"""Scan a chart library and write a song-select catalog."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Iterator

from taiko_chart.errors import ChartError
from taiko_chart.parsers.info_parser import build_summary
from taiko_chart.parsers.medley_parser import build_medley_summary
from taiko_chart.schemas.detection import SUPPORTED_EXTENSIONS, ChartFormat, detect_chart_format
from taiko_chart.schemas.normalized import MedleySummary, SelectableSummary
from taiko_chart.storage.writer import write_catalog

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    input_dir: Path = Path("charts")
    output_dir: Path = Path("data/catalog")
    include_medley: bool = True

    def save(self, path: Path) -> None:
        """Save config to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {k: str(v) if isinstance(v, Path) else v for k, v in asdict(self).items()}
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> PipelineConfig:
        """Load config from JSON file. Unknown keys are ignored."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in data.items() if k in known})
        config.input_dir = Path(config.input_dir)
        config.output_dir = Path(config.output_dir)
        return config


@dataclass
class PipelineResult:
    total_charts: int = 0
    total_courses: int = 0
    total_medleys: int = 0
    errors: list[str] = field(default_factory=list)


def iter_chart_files(input_dir: Path, include_medley: bool = True) -> Iterator[Path]:
    """Yield .tci (and optionally .tcm) files below *input_dir* in sorted order."""
    input_dir = Path(input_dir)
    if not input_dir.exists():
        logger.warning("Chart directory not found: %s", input_dir)
        return

    for path in sorted(input_dir.rglob("*")):
        if not path.is_file() or path.suffix not in SUPPORTED_EXTENSIONS:
            continue
        if detect_chart_format(path) is ChartFormat.MEDLEY and not include_medley:
            continue
        yield path


def run_pipeline(config: PipelineConfig) -> PipelineResult:
    """Summarize every chart under config.input_dir and write the catalog.

    Charts that fail to decode are logged, recorded in ``errors`` and left
    out of the catalog.
    """
    result = PipelineResult()
    summaries: list[SelectableSummary] = []
    medleys: list[MedleySummary] = []

    logger.info("Scanning %s...", config.input_dir)
    for path in iter_chart_files(config.input_dir, config.include_medley):
        try:
            if detect_chart_format(path) is ChartFormat.MEDLEY:
                medleys.append(build_medley_summary(path))
            else:
                summaries.append(build_summary(path))
        except (ChartError, OSError):
            logger.exception("Failed to read chart %s", path)
            result.errors.append(str(path))

    logger.info("Writing %d charts to %s...", len(summaries), config.output_dir)
    write_catalog(summaries, config.output_dir, medleys=medleys)

    result.total_charts = len(summaries)
    result.total_courses = sum(len(s.courses) for s in summaries)
    result.total_medleys = len(medleys)
    logger.info(
        "Pipeline complete: %d charts, %d courses, %d medleys, %d errors",
        result.total_charts,
        result.total_courses,
        result.total_medleys,
        len(result.errors),
    )
    return result
