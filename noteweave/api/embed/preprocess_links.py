"""Rewrite wikilinks and embeds into plain markdown (UNO: single function)."""

import logging

from ._embed_replacement import _embed_replacement
from ._splice import _splice
from .find_link_spans import find_link_spans
from .link_display_text import link_display_text
from .LinkSpan import LinkSpan
from .obs_link_href import obs_link_href
from .parse_wikilink_inner import parse_wikilink_inner
from .RenderContext import RenderContext
from .resolve_target import resolve_target
from .ResolveResult import Placeholder, Resolved

logger = logging.getLogger(__name__)


def _wikilink_replacement(span: LinkSpan, ctx: RenderContext) -> str:
    parsed = parse_wikilink_inner(span.raw_inner)
    resolved = resolve_target(parsed, ctx.index)
    path = resolved.path if isinstance(resolved, (Resolved, Placeholder)) else None
    if path is None:
        logger.debug("Unresolved wikilink %r", parsed.target)
    return f"[{link_display_text(parsed)}]({obs_link_href(path)})"


def preprocess_links(markdown: str, ctx: RenderContext) -> str:
    """Replace every link span in ``markdown`` outside code.

    Embeds become the target's expanded markdown (or a placeholder);
    wikilinks become markdown links on the app-internal scheme.

    Args:
        markdown: Raw note content
        ctx: Render context for the current top-level call

    Returns:
        Markdown with no remaining ``[[...]]`` spans outside code
    """
    spans = find_link_spans(markdown)
    if not spans:
        return markdown

    def replace(span: LinkSpan) -> str:
        if span.is_embed:
            return _embed_replacement(parse_wikilink_inner(span.raw_inner), ctx)
        return _wikilink_replacement(span, ctx)

    return _splice(markdown, spans, replace)
