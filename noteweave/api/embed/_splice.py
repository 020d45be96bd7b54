"""Right-to-left span substitution (private)."""

from collections.abc import Callable, Iterable
from typing import Protocol


class _Span(Protocol):
    start: int
    end: int


def _splice(text: str, spans: Iterable[_Span], replace: Callable[[_Span], str]) -> str:
    """Replace byte ranges of ``text``, last span first so earlier offsets stay valid."""
    data = bytearray(text.encode("utf-8"))
    for span in sorted(spans, key=lambda s: s.start, reverse=True):
        data[span.start : span.end] = replace(span).encode("utf-8")
    return data.decode("utf-8")
