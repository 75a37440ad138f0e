"""Detect the Open Taiko Chart document family from a file path.

The family is decided purely by the file extension, compared
case-sensitively: ``.tci`` is a single-song chart info document and
``.tcm`` is a medley.
"""

from enum import Enum
from pathlib import Path

from taiko_chart.errors import UnsupportedFormatError

INFO_EXTENSION = ".tci"
MEDLEY_EXTENSION = ".tcm"
SUPPORTED_EXTENSIONS = (INFO_EXTENSION, MEDLEY_EXTENSION)


class ChartFormat(str, Enum):
    INFO = "tci"
    MEDLEY = "tcm"


def detect_chart_format(path: Path | str) -> ChartFormat:
    """Detect the chart format of *path*.

    Args:
        path: Path to a chart root document.

    Returns:
        ``ChartFormat.INFO`` or ``ChartFormat.MEDLEY``.

    Raises:
        UnsupportedFormatError: If the extension is not ``.tci`` or ``.tcm``.
    """
    suffix = Path(path).suffix
    if suffix == INFO_EXTENSION:
        return ChartFormat.INFO
    if suffix == MEDLEY_EXTENSION:
        return ChartFormat.MEDLEY
    raise UnsupportedFormatError(
        f"Unsupported chart extension {suffix!r} for {path}. "
        f"Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}."
    )
