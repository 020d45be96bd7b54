"""Code-span detection for the link scanner (UNO: single function)."""

FENCE = b"```"
BACKTICK = ord("`")
NEWLINE = ord("\n")


def _find_fence_line(data: bytes, pos: int) -> int:
    """Offset of the next line at or after ``pos`` that starts with a fence, or -1."""
    if data.startswith(FENCE, pos) and (pos == 0 or data[pos - 1] == NEWLINE):
        return pos
    found = data.find(b"\n" + FENCE, pos)
    return -1 if found == -1 else found + 1


def _fence_ranges(data: bytes) -> list[tuple[int, int]]:
    ranges: list[tuple[int, int]] = []
    size = len(data)
    start = _find_fence_line(data, 0)
    while start != -1:
        line_end = data.find(b"\n", start)
        body = size if line_end == -1 else line_end + 1
        close = _find_fence_line(data, body)
        if close == -1:
            ranges.append((start, size - 1))
            break
        ranges.append((start, close + len(FENCE) - 1))
        start = _find_fence_line(data, close + len(FENCE))
    return ranges


def _inline_ranges(data: bytes, lo: int, hi: int) -> list[tuple[int, int]]:
    """Backtick pairs within ``data[lo:hi]``; a backtick with no partner there is skipped."""
    ranges: list[tuple[int, int]] = []
    i = data.find(b"`", lo, hi)
    while i != -1:
        close = data.find(b"`", i + 1, hi)
        if close == -1:
            break
        ranges.append((i, close))
        i = data.find(b"`", close + 1, hi)
    return ranges


def compute_skip_ranges(text: str) -> list[tuple[int, int]]:
    """Return inclusive byte ranges of ``text`` that must not be scanned for links.

    Two kinds of range are produced, in source order:

    * fenced code: a line starting with three backticks through the next line
      starting with three backticks (an unterminated fence runs to the end of
      the text);
    * inline code: a backtick through the next backtick in the same stretch
      of text between fences. A lone backtick produces no range and never
      pairs with a fence.

    Offsets index the UTF-8 encoding of ``text``.

    Args:
        text: Raw note content

    Returns:
        List of ``(first_byte, last_byte)`` tuples
    """
    data = text.encode("utf-8")
    fences = _fence_ranges(data)
    ranges: list[tuple[int, int]] = []
    pos = 0
    for first, last in fences:
        ranges.extend(_inline_ranges(data, pos, first))
        ranges.append((first, last))
        pos = last + 1
    ranges.extend(_inline_ranges(data, pos, len(data)))
    return ranges
