"""EmbedSpan model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmbedSpan:
    """One ``![[...]]`` occurrence; byte offsets as in LinkSpan."""

    start: int
    end: int
    raw_inner: str
