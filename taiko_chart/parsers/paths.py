"""Resolve document-relative references."""

from pathlib import Path


def root_dir_of(file_path: Path | str) -> Path:
    """Absolute directory containing *file_path*."""
    return Path(file_path).absolute().parent


def resolve(root_dir: Path, relative_path: str | None) -> Path | None:
    """Join *relative_path* onto *root_dir*. No existence check; None stays None."""
    if relative_path is None:
        return None
    return Path(root_dir) / relative_path
