"""Read Open Taiko Chart documents from disk into typed documents."""

import json
from pathlib import Path
from typing import Any

from taiko_chart.errors import DecodeError
from taiko_chart.schemas.documents import (
    ChartInfoDocument,
    CourseBody,
    MedleyDocument,
    decode_course,
    decode_info,
    decode_medley,
)


def read_document(filepath: Path) -> Any:
    """Read a UTF-8 JSON document. Raises DecodeError on any read or parse failure."""
    filepath = Path(filepath)
    try:
        # utf-8-sig drops the BOM some editors write
        text = filepath.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise DecodeError(filepath, "file not found") from exc
    except (OSError, ValueError) as exc:
        # ValueError covers UnicodeDecodeError and embedded null bytes
        raise DecodeError(filepath, str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(filepath, f"invalid JSON ({exc})") from exc
    except (ValueError, RecursionError) as exc:
        raise DecodeError(filepath, f"invalid JSON ({exc!r})") from exc


def read_info(filepath: Path) -> ChartInfoDocument:
    filepath = Path(filepath)
    return decode_info(read_document(filepath), filepath)


def read_course(filepath: Path) -> CourseBody:
    filepath = Path(filepath)
    return decode_course(read_document(filepath), filepath)


def read_medley(filepath: Path) -> MedleyDocument:
    filepath = Path(filepath)
    return decode_medley(read_document(filepath), filepath)
