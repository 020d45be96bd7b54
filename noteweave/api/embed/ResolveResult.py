"""Target resolution outcomes."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Resolved:
    """Target is a note whose content can be inlined or linked."""

    path: Path


@dataclass(frozen=True)
class Placeholder:
    """Target is a binary asset (image, PDF) that is linked, never inlined."""

    path: Path


@dataclass(frozen=True)
class NotFound:
    """Nothing in the vault matches the target."""


@dataclass(frozen=True)
class Ambiguous:
    """Several notes match equally well.

    resolve_target never returns this: shared basenames are settled by the
    sorted-first path. Callers still handle it.
    """

    paths: tuple[Path, ...] = field(default_factory=tuple)


ResolveResult = Resolved | Placeholder | NotFound | Ambiguous
