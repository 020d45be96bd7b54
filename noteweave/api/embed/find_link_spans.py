"""Wikilink and embed span scanner (UNO: single function)."""

from .compute_skip_ranges import compute_skip_ranges
from .LinkSpan import LinkSpan

OPEN = b"[["
CLOSE = b"]]"
BANG = ord("!")


def _in_skip_range(pos: int, skip: list[tuple[int, int]]) -> bool:
    return any(first <= pos <= last for first, last in skip)


def find_link_spans(text: str, skip: list[tuple[int, int]] | None = None) -> list[LinkSpan]:
    """Find every ``[[...]]`` and ``![[...]]`` span outside code.

    A ``[[`` with no later ``]]`` is plain text; scanning resumes right after
    the opening brackets.

    Args:
        text: Raw note content
        skip: Precomputed ranges from compute_skip_ranges (computed when omitted)

    Returns:
        LinkSpan objects in source order, offsets in UTF-8 bytes
    """
    if skip is None:
        skip = compute_skip_ranges(text)
    data = text.encode("utf-8")
    spans: list[LinkSpan] = []
    i = 0
    while i + len(OPEN) <= len(data):
        if not data.startswith(OPEN, i):
            i += 1
            continue
        if _in_skip_range(i, skip):
            i += 1
            continue
        is_embed = i > 0 and data[i - 1] == BANG
        content_start = i + len(OPEN)
        close = data.find(CLOSE, content_start)
        if close == -1:
            i = content_start
            continue
        spans.append(
            LinkSpan(
                is_embed=is_embed,
                start=i - 1 if is_embed else i,
                end=close + len(CLOSE),
                raw_inner=data[content_start:close].decode("utf-8"),
            )
        )
        i = close + len(CLOSE)
    return spans
