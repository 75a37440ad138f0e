"""Tests for the catalog pipeline and its configuration."""

import json
import shutil
from pathlib import Path

from taiko_chart.pipeline.batch import PipelineConfig, iter_chart_files, run_pipeline
from taiko_chart.storage.writer import read_catalog

FIXTURES = Path(__file__).parent / "fixtures"


def _library(tmp_path: Path) -> Path:
    library = tmp_path / "charts"
    shutil.copytree(FIXTURES, library)
    return library


class TestPipelineConfig:
    def test_round_trip(self, tmp_path):
        config = PipelineConfig(
            input_dir=Path("in"), output_dir=Path("out"), include_medley=False
        )
        config.save(tmp_path / "cfg" / "pipeline.json")
        loaded = PipelineConfig.load(tmp_path / "cfg" / "pipeline.json")
        assert loaded == config

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "pipeline.json"
        path.write_text(json.dumps({"input_dir": "x", "threads": 4}), encoding="utf-8")
        loaded = PipelineConfig.load(path)
        assert loaded.input_dir == Path("x")
        assert loaded.output_dir == PipelineConfig().output_dir


class TestIterChartFiles:
    def test_finds_charts_sorted(self, tmp_path):
        library = _library(tmp_path)
        found = [p.relative_to(library).as_posix() for p in iter_chart_files(library)]
        assert found == ["medley/medley.tcm", "single_song/song.tci"]

    def test_skip_medley(self, tmp_path):
        library = _library(tmp_path)
        found = list(iter_chart_files(library, include_medley=False))
        assert [p.name for p in found] == ["song.tci"]

    def test_missing_dir(self, tmp_path):
        assert list(iter_chart_files(tmp_path / "nowhere")) == []


class TestRunPipeline:
    def test_run(self, tmp_path):
        library = _library(tmp_path)
        result = run_pipeline(PipelineConfig(input_dir=library, output_dir=tmp_path / "out"))
        assert result.total_charts == 1
        assert result.total_courses == 2  # oni + easy, hard file missing
        assert result.total_medleys == 1
        assert result.errors == []
        assert read_catalog(tmp_path / "out").num_rows == 2

    def test_large_level_is_cataloged(self, tmp_path):
        library = _library(tmp_path)
        big = library / "big"
        big.mkdir()
        (big / "oni.json").write_text(json.dumps({"measures": []}), encoding="utf-8")
        (big / "big.tci").write_text(
            json.dumps({"title": "Big", "courses": [{"difficulty": "oni", "level": 40000, "single": "oni.json"}]}),
            encoding="utf-8",
        )

        result = run_pipeline(PipelineConfig(input_dir=library, output_dir=tmp_path / "out"))
        assert result.errors == []
        assert result.total_charts == 2
        assert 40000 in read_catalog(tmp_path / "out").column("level").to_pylist()

    def test_null_byte_reference_is_recorded(self, tmp_path):
        library = _library(tmp_path)
        chart = library / "nul" / "nul.tci"
        chart.parent.mkdir()
        (chart.parent / "s.json").write_text("{}", encoding="utf-8")
        chart.write_text(
            json.dumps({"courses": [{"difficulty": "oni", "single": "s.json", "multiple": ["m\u0000.json"]}]}),
            encoding="utf-8",
        )

        result = run_pipeline(PipelineConfig(input_dir=library, output_dir=tmp_path / "out"))
        assert result.errors == [str(chart)]
        assert result.total_charts == 1

    def test_broken_chart_is_recorded(self, tmp_path):
        library = _library(tmp_path)
        broken = library / "broken" / "broken.tci"
        broken.parent.mkdir()
        broken.write_text("{", encoding="utf-8")

        result = run_pipeline(PipelineConfig(input_dir=library, output_dir=tmp_path / "out"))
        assert result.errors == [str(broken)]
        assert result.total_charts == 1
        catalog = json.loads((tmp_path / "out" / "catalog.json").read_text(encoding="utf-8"))
        assert [c["title"] for c in catalog["charts"]] == ["Test Song"]
