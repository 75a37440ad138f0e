"""Write song-select catalogs to Parquet files and JSON metadata."""

import json
import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from taiko_chart.schemas.normalized import DifficultyTier, MedleySummary, SelectableSummary

logger = logging.getLogger(__name__)

# Maximum number of course rows per Parquet file before starting a new file.
MAX_ROWS_PER_FILE: int = 1_000_000

# Row order of tiers inside one chart.
TIER_ORDER = (
    DifficultyTier.EASY,
    DifficultyTier.NORMAL,
    DifficultyTier.HARD,
    DifficultyTier.ONI,
    DifficultyTier.EDIT,
)

# --- Arrow schemas -----------------------------------------------------------

COURSES_SCHEMA = pa.schema(
    [
        pa.field("file_path", pa.string()),
        pa.field("title", pa.string()),
        pa.field("subtitle", pa.string()),
        pa.field("artist", pa.list_(pa.string())),
        pa.field("bpm", pa.float64()),
        pa.field("difficulty", pa.string()),
        pa.field("level", pa.int64()),
    ]
)


def _optional_str(value: Path | str | None) -> str | None:
    return None if value is None else str(value)


def _summary_record(summary: SelectableSummary) -> dict:
    return {
        "file_path": str(summary.file_path),
        "title": summary.title,
        "subtitle": summary.subtitle,
        "artist": list(summary.artist) if summary.artist is not None else None,
        "creator": list(summary.creator) if summary.creator is not None else None,
        "bpm": summary.bpm,
        "preview_song": _optional_str(summary.preview_song),
        "song_preview_time": summary.song_preview_time,
        "albumart_path": _optional_str(summary.albumart_path),
        "background_path": _optional_str(summary.background_path),
        "courses": {
            tier.value: {"level": summary.courses[tier].level}
            for tier in TIER_ORDER
            if tier in summary.courses
        },
    }


def _medley_record(medley: MedleySummary) -> dict:
    return {
        "file_path": str(medley.file_path),
        "title": medley.title,
        "exams": [
            {"type": e.type, "range": e.range, "value": list(e.value) if e.value is not None else None}
            for e in medley.exams
        ],
        "charts": [
            {"file": _optional_str(c.path), "difficulty": c.difficulty, "tier": c.tier.value}
            for c in medley.charts
        ],
    }


def write_catalog(
    summaries: list[SelectableSummary],
    output_dir: Path,
    medleys: list[MedleySummary] | None = None,
    max_rows_per_file: int = MAX_ROWS_PER_FILE,
) -> list[Path]:
    """Write chart summaries as Parquet course rows plus catalog.json.

    Produces inside *output_dir*:
      - courses_NNNN.parquet  (zero or more, one row per chart and tier)
      - catalog.json          (charts and medleys with full metadata)

    Returns the list of written Parquet paths.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    cols: dict[str, list] = {k: [] for k in COURSES_SCHEMA.names}
    for summary in sorted(summaries, key=lambda s: str(s.file_path)):
        for tier in TIER_ORDER:
            entry = summary.courses.get(tier)
            if entry is None:
                continue
            cols["file_path"].append(str(summary.file_path))
            cols["title"].append(summary.title)
            cols["subtitle"].append(summary.subtitle)
            cols["artist"].append(list(summary.artist) if summary.artist is not None else None)
            cols["bpm"].append(summary.bpm)
            cols["difficulty"].append(tier.value)
            cols["level"].append(entry.level)

    table = pa.table(cols, schema=COURSES_SCHEMA)
    written: list[Path] = []
    for file_idx, start in enumerate(range(0, table.num_rows, max_rows_per_file)):
        path = output_dir / f"courses_{file_idx:04d}.parquet"
        pq.write_table(table.slice(start, max_rows_per_file), path, compression="snappy")
        written.append(path)

    logger.info("Wrote %d course rows in %d file(s) to %s", table.num_rows, len(written), output_dir)

    catalog = {
        "charts": [_summary_record(s) for s in summaries],
        "medleys": [_medley_record(m) for m in medleys or []],
    }
    with open(output_dir / "catalog.json", "w", encoding="utf-8") as f:
        json.dump(catalog, f, indent=2, ensure_ascii=False)

    return written


def read_catalog(path: Path) -> pa.Table:
    """Read course Parquet file(s) and return a single Arrow table.

    Accepts either a single ``.parquet`` file or a directory containing
    ``courses_*.parquet`` files.
    """
    path = Path(path)
    if path.is_dir():
        files = sorted(path.glob("courses_*.parquet"))
        if not files:
            raise FileNotFoundError(f"No course Parquet files in {path}")
        return pa.concat_tables([pq.read_table(f) for f in files])
    return pq.read_table(path)
