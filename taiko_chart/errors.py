"""Exceptions raised while reading Open Taiko Chart files."""

from pathlib import Path


class ChartError(Exception):
    """Base class for every error raised by the chart reader."""


class DecodeError(ChartError, ValueError):
    """A document is missing, unreadable, not valid JSON, or has the wrong shape."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot decode {self.path}: {reason}")


class AssemblyError(ChartError):
    """A course reference could not be assembled into course bodies."""


class MissingCourseFileError(AssemblyError, FileNotFoundError):
    """The single-player course file of a reference does not exist."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Single-player course file not found: {self.path}")


class UnsupportedFormatError(ChartError, NotImplementedError):
    """The requested operation is not available for this chart format."""
