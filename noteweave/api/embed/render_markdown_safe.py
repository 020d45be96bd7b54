"""Safe markdown renderer (UNO: single function)."""

from markdown_it import MarkdownIt

# Raw HTML in note content is escaped, never passed through.
_md = MarkdownIt("commonmark", {"html": False}).enable("table").enable("strikethrough")


def render_markdown_safe(markdown: str) -> str:
    """Render markdown to HTML with raw HTML disabled."""
    return _md.render(markdown)
