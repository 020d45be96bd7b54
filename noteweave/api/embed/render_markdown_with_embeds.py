"""Top-level note rendering with embed expansion (UNO: single function)."""

import logging
from pathlib import Path

from . import _placeholders
from .expand_note import expand_note
from .postprocess_html import postprocess_html
from .render_markdown_safe import render_markdown_safe
from .RenderContext import RenderContext

logger = logging.getLogger(__name__)


def _mtime_ns(path: Path) -> int:
    try:
        return path.stat().st_mtime_ns
    except OSError:
        return 0


def render_markdown_with_embeds(path: Path | str, ctx: RenderContext) -> str:
    """Render a note to HTML with wikilinks resolved and embeds inlined.

    The result is cached under the note's canonical path and modification
    time; an unchanged note is served from ``ctx.cache`` without being read.
    Only the top-level note's mtime is checked, so edits to embedded notes
    show up once the embedding note itself changes or the cache is cleared.

    Args:
        path: Note to render
        ctx: Fresh render context for this call

    Returns:
        Final HTML, always; unresolvable parts degrade to inline placeholders
    """
    try:
        canonical = Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        logger.warning("Cannot canonicalize note path %s", path)
        return render_markdown_safe(_placeholders.INVALID_PATH)

    mtime = _mtime_ns(canonical)
    cached = ctx.cache.get(canonical, mtime)
    if cached is not None:
        return cached

    expanded = expand_note(canonical, ctx)
    html = postprocess_html(render_markdown_safe(expanded))
    ctx.cache.insert(canonical, mtime, html)
    return html
