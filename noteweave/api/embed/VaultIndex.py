"""Vault index (UNO: single class)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from ._constants import NOTE_SUFFIX
from .normalize_rel_key import normalize_rel_key
from .VaultIndexError import VaultIndexError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VaultIndex:
    """Lookup tables from link targets to canonical note paths.

    ``by_rel_path`` maps a root-relative slash path, with and without the
    ``.md`` suffix, to the note's canonical path. ``by_basename`` maps a file
    stem to every canonical path sharing it, sorted so the first entry is a
    stable tie-break.
    """

    root: Path
    by_rel_path: dict[str, Path] = field(default_factory=dict)
    by_basename: dict[str, list[Path]] = field(default_factory=dict)

    @property
    def note_count(self) -> int:
        return sum(len(paths) for paths in self.by_basename.values())

    def ambiguous_basenames(self) -> dict[str, list[Path]]:
        """Basenames shared by more than one note."""
        return {name: list(paths) for name, paths in self.by_basename.items() if len(paths) > 1}

    @classmethod
    def build_index(cls, vault_root: Path | str) -> VaultIndex:
        """Walk ``vault_root`` and index every markdown note.

        Hidden directories (leading ``.``) are pruned before descending.

        Raises:
            VaultIndexError: If the root cannot be canonicalized or any
                directory cannot be read
        """
        try:
            root = Path(vault_root).expanduser().resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise VaultIndexError(vault_root, str(exc)) from exc
        if not root.is_dir():
            raise VaultIndexError(root, "not a directory")

        by_rel_path: dict[str, Path] = {}
        by_basename: dict[str, list[Path]] = {}

        def _fail(exc: OSError) -> None:
            raise VaultIndexError(exc.filename or root, exc.strerror or str(exc)) from exc

        for dirpath, dirnames, filenames in os.walk(root, onerror=_fail):
            dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
            for filename in sorted(filenames):
                if not filename.endswith(NOTE_SUFFIX):
                    continue
                note = Path(dirpath) / filename
                try:
                    canonical = note.resolve(strict=True)
                    rel = canonical.relative_to(root)
                except (OSError, RuntimeError) as exc:
                    raise VaultIndexError(note, str(exc)) from exc
                except ValueError:
                    logger.warning("Skipping %s: resolves outside vault root %s", note, root)
                    continue
                rel_key = normalize_rel_key(rel.as_posix())
                by_rel_path[rel_key] = canonical
                by_rel_path[rel_key[: -len(NOTE_SUFFIX)]] = canonical
                by_basename.setdefault(note.stem, []).append(canonical)

        for paths in by_basename.values():
            paths.sort()

        index = cls(root=root, by_rel_path=by_rel_path, by_basename=by_basename)
        logger.info("Indexed %d notes under %s", index.note_count, root)
        return index
