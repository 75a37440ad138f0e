"""Tests for the command-line interface."""

import json
import sys
from pathlib import Path

import pytest

from taiko_chart import cli

FIXTURES = Path(__file__).parent / "fixtures"
SONG = FIXTURES / "single_song" / "song.tci"


def _run(monkeypatch, capsys, *argv):
    monkeypatch.setattr(sys, "argv", ["taiko-chart", *argv])
    cli.main()
    return capsys.readouterr()


class TestCli:
    def test_info(self, monkeypatch, capsys):
        out = json.loads(_run(monkeypatch, capsys, "info").out)
        assert out["name"] == "OpenTaikoChart"
        assert out["extensions"] == [".tci", ".tcm"]

    def test_summary(self, monkeypatch, capsys):
        out = json.loads(_run(monkeypatch, capsys, "summary", str(SONG)).out)
        assert out["title"] == "Test Song"
        assert out["courses"] == {"oni": {"level": 8}, "easy": {"level": 2}}

    def test_playable(self, monkeypatch, capsys):
        out = json.loads(
            _run(monkeypatch, capsys, "playable", str(SONG), "--difficulty", "oni").out
        )
        assert [p["player"] for p in out["playables"]] == ["single", "multiple[0]", "multiple[1]"]
        assert out["playables"][0]["measures"] == 3
        assert out["playables"][0]["note_tokens"] == 12
        assert out["chart_info"]["title"] == ["Test Song"]

    def test_playable_missing_tier(self, monkeypatch, capsys):
        out = _run(monkeypatch, capsys, "playable", str(SONG), "--difficulty", "normal").out
        assert "No normal course" in out

    def test_decode_error_exits(self, monkeypatch, capsys, tmp_path):
        broken = tmp_path / "broken.tci"
        broken.write_text("{", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            _run(monkeypatch, capsys, "summary", str(broken))
        assert excinfo.value.code == 1
        assert "error:" in capsys.readouterr().err

    def test_catalog(self, monkeypatch, capsys, tmp_path):
        out = _run(
            monkeypatch, capsys, "catalog",
            "--input", str(FIXTURES), "--output", str(tmp_path / "out"),
        ).out
        assert "1 charts, 2 courses, 1 medleys, 0 errors" in out
        assert (tmp_path / "out" / "catalog.json").exists()
