"""Tests for the Parquet catalog writer and reader."""

import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from taiko_chart.schemas.normalized import (
    DifficultyEntry,
    DifficultyTier,
    MedleyChartEntry,
    MedleySummary,
    SelectableSummary,
)
from taiko_chart.storage.writer import read_catalog, write_catalog


def _make_summary(name: str, levels: dict[DifficultyTier, int | None]) -> SelectableSummary:
    return SelectableSummary(
        file_path=Path(f"/charts/{name}/{name}.tci"),
        title=name.title(),
        artist=("Artist",),
        bpm=140.0,
        preview_song=Path(f"/charts/{name}/song.ogg"),
        courses={tier: DifficultyEntry(level=lv) for tier, lv in levels.items()},
    )


class TestWriteCatalog:
    def test_one_row_per_tier(self, tmp_path):
        summaries = [
            _make_summary("alpha", {DifficultyTier.ONI: 8, DifficultyTier.EASY: 2}),
            _make_summary("beta", {DifficultyTier.HARD: 6}),
        ]
        written = write_catalog(summaries, tmp_path)
        assert [p.name for p in written] == ["courses_0000.parquet"]

        table = read_catalog(tmp_path)
        assert table.num_rows == 3
        assert table.column("difficulty").to_pylist() == ["easy", "oni", "hard"]
        assert table.column("level").to_pylist() == [2, 8, 6]
        assert table.column("artist").to_pylist()[0] == ["Artist"]

    def test_null_level_and_artist(self, tmp_path):
        summary = _make_summary("gamma", {DifficultyTier.EDIT: None})
        summary.artist = None
        write_catalog([summary], tmp_path)
        table = read_catalog(tmp_path / "courses_0000.parquet")
        assert table.column("level").to_pylist() == [None]
        assert table.column("artist").to_pylist() == [None]

    def test_large_level_and_precise_bpm(self, tmp_path):
        summary = _make_summary("delta", {DifficultyTier.ONI: 40000})
        summary.bpm = 173.123456789
        write_catalog([summary], tmp_path)
        table = read_catalog(tmp_path)
        assert table.column("level").to_pylist() == [40000]
        assert table.column("bpm").to_pylist() == [173.123456789]

    def test_file_splitting(self, tmp_path):
        summaries = [
            _make_summary(f"s{i}", {DifficultyTier.ONI: i}) for i in range(5)
        ]
        written = write_catalog(summaries, tmp_path, max_rows_per_file=2)
        assert len(written) == 3
        assert pq.ParquetFile(written[-1]).metadata.num_rows == 1
        assert read_catalog(tmp_path).num_rows == 5

    def test_catalog_json(self, tmp_path):
        medley = MedleySummary(
            file_path=Path("/charts/m.tcm"),
            title="Medley",
            charts=[MedleyChartEntry(path=Path("/charts/a.tci"), difficulty="x", tier=DifficultyTier.ONI)],
        )
        write_catalog(
            [_make_summary("alpha", {DifficultyTier.ONI: 8})], tmp_path, medleys=[medley]
        )
        catalog = json.loads((tmp_path / "catalog.json").read_text(encoding="utf-8"))
        chart = catalog["charts"][0]
        assert chart["courses"] == {"oni": {"level": 8}}
        assert chart["preview_song"] == str(Path("/charts/alpha/song.ogg"))
        assert chart["albumart_path"] is None
        assert catalog["medleys"][0]["charts"][0]["tier"] == "oni"

    def test_empty_catalog(self, tmp_path):
        assert write_catalog([], tmp_path) == []
        assert json.loads((tmp_path / "catalog.json").read_text()) == {"charts": [], "medleys": []}
        with pytest.raises(FileNotFoundError):
            read_catalog(tmp_path)
