"""ParsedLink model (UNO: single model)."""

from dataclasses import dataclass

from .Subtarget import Subtarget


@dataclass(frozen=True)
class ParsedLink:
    """Target, optional subtarget and optional alias of one link span.

    The subtarget is carried for callers but never narrows what gets
    embedded; the whole target note is always inlined.
    """

    target: str
    subtarget: Subtarget | None = None
    alias: str | None = None
