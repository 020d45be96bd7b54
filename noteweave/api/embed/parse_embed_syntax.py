"""Embed span parser (UNO: single function)."""

from .EmbedSpan import EmbedSpan
from .find_link_spans import find_link_spans


def parse_embed_syntax(text: str) -> list[EmbedSpan]:
    """Extract all ``![[...]]`` spans from markdown text, skipping code."""
    return [
        EmbedSpan(start=span.start, end=span.end, raw_inner=span.raw_inner)
        for span in find_link_spans(text)
        if span.is_embed
    ]
