"""Embed-only expansion (UNO: single function)."""

from ._embed_replacement import _embed_replacement
from ._splice import _splice
from .EmbedSpan import EmbedSpan
from .parse_embed_syntax import parse_embed_syntax
from .parse_wikilink_inner import parse_wikilink_inner
from .RenderContext import RenderContext


def expand_embeds(markdown: str, ctx: RenderContext) -> str:
    """Inline ``![[...]]`` embeds and leave plain ``[[...]]`` wikilinks as written."""
    spans = parse_embed_syntax(markdown)
    if not spans:
        return markdown

    def replace(span: EmbedSpan) -> str:
        return _embed_replacement(parse_wikilink_inner(span.raw_inner), ctx)

    return _splice(markdown, spans, replace)
