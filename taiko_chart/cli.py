"""Command-line interface for the Open Taiko Chart reader."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from taiko_chart.errors import ChartError
from taiko_chart.schemas.normalized import DifficultyTier


def _to_jsonable(value):
    if isinstance(value, DifficultyTier):
        return value.value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(_to_jsonable(k)): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def _print_json(data) -> None:
    print(json.dumps(_to_jsonable(data), indent=2, ensure_ascii=False))


def cmd_info(args: argparse.Namespace) -> None:
    from taiko_chart.reader import OpenTaikoChartReader

    reader = OpenTaikoChartReader()
    _print_json({
        "name": reader.name,
        "creator": reader.creator,
        "description": reader.description,
        "version": reader.version,
        "extensions": reader.get_extensions(),
    })


def cmd_summary(args: argparse.Namespace) -> None:
    from taiko_chart.reader import OpenTaikoChartReader

    summary = OpenTaikoChartReader().get_selectable(Path(args.file))
    if summary is None:
        print(f"Not a chart file: {args.file}")
        return
    _print_json(asdict(summary))


def cmd_playable(args: argparse.Namespace) -> None:
    from taiko_chart.reader import OpenTaikoChartReader

    tier = DifficultyTier.parse_name(args.difficulty)
    playable_set, chart_info = OpenTaikoChartReader().get_playable(Path(args.file), tier)
    if playable_set is None:
        print(f"No {tier.value} course in {args.file}")
        return

    _print_json({
        "difficulty": tier.value,
        "chart_info": asdict(chart_info),
        "playables": [
            {
                "player": "single" if i == 0 else f"multiple[{i - 1}]",
                "measures": p.measure_count,
                "note_tokens": p.note_token_count,
                "balloon": p.balloon,
                "scoreinit": p.scoreinit,
                "scorediff": p.scorediff,
                "scoreshinuchi": p.scoreshinuchi,
            }
            for i, p in enumerate(playable_set)
        ],
    })


def cmd_catalog(args: argparse.Namespace) -> None:
    from taiko_chart.pipeline.batch import PipelineConfig, run_pipeline

    config = PipelineConfig()
    if args.config:
        config = PipelineConfig.load(Path(args.config))
    if args.input:
        config.input_dir = Path(args.input)
    if args.output:
        config.output_dir = Path(args.output)
    if args.no_medley:
        config.include_medley = False

    result = run_pipeline(config)
    print(
        f"Done: {result.total_charts} charts, {result.total_courses} courses, "
        f"{result.total_medleys} medleys, {len(result.errors)} errors"
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="taiko-chart",
        description="Open Taiko Chart (.tci/.tcm) reader",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")

    # info
    sub.add_parser("info", help="Show reader name, version and extensions")

    # summary
    sm = sub.add_parser("summary", help="Print the song select summary of a chart")
    sm.add_argument("file", help="Path to a .tci or .tcm file")

    # playable
    pl = sub.add_parser("playable", help="Assemble one difficulty of a chart")
    pl.add_argument("file", help="Path to a .tci file")
    pl.add_argument("--difficulty", default="oni",
                    choices=[t.value for t in DifficultyTier],
                    help="Difficulty tier (default: oni)")

    # catalog
    cat = sub.add_parser("catalog", help="Summarize a chart library into Parquet")
    cat.add_argument("--input", default=None, help="Chart directory to scan")
    cat.add_argument("--output", default=None, help="Output catalog directory")
    cat.add_argument("--config", default=None, help="Optional JSON config")
    cat.add_argument("--no-medley", action="store_true", help="Skip .tcm files")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "info": cmd_info,
        "summary": cmd_summary,
        "playable": cmd_playable,
        "catalog": cmd_catalog,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return
    try:
        handler(args)
    except ChartError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
