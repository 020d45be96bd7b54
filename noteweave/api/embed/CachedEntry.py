"""CachedEntry model (UNO: single model)."""

from dataclasses import dataclass


@dataclass
class CachedEntry:
    """Rendered HTML for one note, tagged with the source mtime it was built from."""

    mtime: int
    html: str
    size_bytes: int
    last_accessed: float
