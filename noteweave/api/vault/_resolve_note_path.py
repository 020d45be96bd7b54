"""Resolve a note argument relative to the CWD or the vault root (private)."""

from pathlib import Path


def _resolve_note_path(path: str, vault_root: Path) -> Path:
    """Absolute paths are kept; relative ones are tried against the CWD first, then the vault."""
    candidate = Path(path).expanduser()
    if candidate.is_absolute() or candidate.exists():
        return candidate
    return vault_root / candidate
