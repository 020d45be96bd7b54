"""RenderContext model (UNO: single model)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ._constants import DEFAULT_MAX_DEPTH
from .RenderCache import RenderCache
from .VaultIndex import VaultIndex


@dataclass
class RenderContext:
    """State for one top-level render call.

    ``index`` is shared read-only; ``cache`` is used exclusively for the
    duration of the call. ``visited`` holds the canonical paths currently on
    the expansion stack and ``depth`` its height; both are restored as each
    embed finishes, so build a fresh context per top-level call.
    """

    vault_root: Path
    index: VaultIndex
    cache: RenderCache
    visited: set[Path] = field(default_factory=set)
    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH

    @classmethod
    def for_index(cls, index: VaultIndex, cache: RenderCache, max_depth: int = DEFAULT_MAX_DEPTH) -> RenderContext:
        return cls(vault_root=index.root, index=index, cache=cache, max_depth=max_depth)
