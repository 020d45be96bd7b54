"""LinkSpan model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkSpan:
    """One ``[[...]]`` or ``![[...]]`` occurrence in a note.

    ``start`` and ``end`` are byte offsets into the UTF-8 encoding of the
    scanned text. For embeds ``start`` points at the ``!``; ``end`` is the
    offset right after the closing ``]]``.
    """

    is_embed: bool
    start: int
    end: int
    raw_inner: str
