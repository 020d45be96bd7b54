"""Recursive note expansion (UNO: single function)."""

import logging
from pathlib import Path

from . import _placeholders
from .preprocess_links import preprocess_links
from .RenderContext import RenderContext

logger = logging.getLogger(__name__)


def expand_note(path: Path, ctx: RenderContext) -> str:
    """Return the note's markdown with all of its links and embeds rewritten.

    A note already on the expansion stack yields a cycle placeholder, and a
    note reached beyond ``ctx.max_depth`` yields a depth-limit placeholder.
    The path is on ``ctx.visited`` only while its own content is expanded.
    """
    try:
        canonical = Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        logger.debug("Cannot canonicalize embed path %s", path)
        return _placeholders.INVALID_PATH

    name = Path(path).name or "?"
    if canonical in ctx.visited:
        logger.debug("Embed cycle at %s", canonical)
        return _placeholders.cycle(name)
    if ctx.depth > ctx.max_depth:
        logger.debug("Embed depth limit %d reached at %s", ctx.max_depth, canonical)
        return _placeholders.depth_limit(name)

    ctx.visited.add(canonical)
    ctx.depth += 1
    try:
        try:
            content = canonical.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read embedded note %s: %s", canonical, exc)
            return _placeholders.READ_ERROR
        return preprocess_links(content, ctx)
    finally:
        ctx.visited.discard(canonical)
        ctx.depth -= 1
