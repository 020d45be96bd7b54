"""Replacement text for a single embed span (private)."""

import logging

from . import _placeholders
from .ParsedLink import ParsedLink
from .RenderContext import RenderContext
from .resolve_target import resolve_target
from .ResolveResult import Ambiguous, NotFound, Placeholder, Resolved

logger = logging.getLogger(__name__)


def _embed_replacement(parsed: ParsedLink, ctx: RenderContext) -> str:
    from .expand_note import expand_note

    resolved = resolve_target(parsed, ctx.index)
    if isinstance(resolved, Resolved):
        return expand_note(resolved.path, ctx)
    if isinstance(resolved, Placeholder):
        return _placeholders.asset_link(resolved.path)
    if isinstance(resolved, Ambiguous):
        logger.debug("Ambiguous embed target %r", parsed.target)
        return _placeholders.ambiguous(parsed.target)
    if isinstance(resolved, NotFound):
        logger.debug("Embed target not found: %r", parsed.target)
        return _placeholders.not_found(parsed.target)
    raise TypeError(f"Unexpected resolve result: {resolved!r}")
