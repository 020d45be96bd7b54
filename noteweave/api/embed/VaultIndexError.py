"""Vault index build error."""

from pathlib import Path


class VaultIndexError(RuntimeError):
    """Raised when a vault index cannot be built; no partial index is kept."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot index vault at {self.path}: {reason}")
