"""Obsidian link resolution, embed expansion and render caching."""

from ._constants import DEFAULT_MAX_DEPTH, LINK_SCHEME, MAX_CACHE_ENTRIES, MAX_CACHE_SIZE_BYTES
from .CachedEntry import CachedEntry
from .CacheStats import CacheStats
from .compute_skip_ranges import compute_skip_ranges
from .EmbedSpan import EmbedSpan
from .expand_embeds import expand_embeds
from .expand_note import expand_note
from .find_link_spans import find_link_spans
from .link_display_text import link_display_text
from .LinkSpan import LinkSpan
from .obs_link_href import obs_link_href, percent_encode_path
from .parse_embed_syntax import parse_embed_syntax
from .parse_wikilink_inner import parse_wikilink_inner
from .ParsedLink import ParsedLink
from .postprocess_html import postprocess_html
from .preprocess_links import preprocess_links
from .render_markdown_safe import render_markdown_safe
from .render_markdown_with_embeds import render_markdown_with_embeds
from .RenderCache import RenderCache
from .RenderContext import RenderContext
from .resolve_target import resolve_target
from .ResolveResult import Ambiguous, NotFound, Placeholder, Resolved, ResolveResult
from .Subtarget import Block, Heading, Subtarget
from .VaultIndex import VaultIndex
from .VaultIndexError import VaultIndexError

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "LINK_SCHEME",
    "MAX_CACHE_ENTRIES",
    "MAX_CACHE_SIZE_BYTES",
    "Ambiguous",
    "Block",
    "CacheStats",
    "CachedEntry",
    "EmbedSpan",
    "Heading",
    "LinkSpan",
    "NotFound",
    "ParsedLink",
    "Placeholder",
    "RenderCache",
    "RenderContext",
    "ResolveResult",
    "Resolved",
    "Subtarget",
    "VaultIndex",
    "VaultIndexError",
    "compute_skip_ranges",
    "expand_embeds",
    "expand_note",
    "find_link_spans",
    "link_display_text",
    "obs_link_href",
    "parse_embed_syntax",
    "parse_wikilink_inner",
    "percent_encode_path",
    "postprocess_html",
    "preprocess_links",
    "render_markdown_safe",
    "render_markdown_with_embeds",
    "resolve_target",
]
