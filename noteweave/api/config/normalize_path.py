"""Normalize a configured path."""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand user and return an absolute path without resolving symlinks."""
    return Path(path).expanduser().absolute()
