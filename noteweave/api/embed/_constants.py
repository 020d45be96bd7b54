"""Constants for embed expansion and link rendering."""

__all__ = [
    "ASSET_EXTENSIONS",
    "DEFAULT_MAX_DEPTH",
    "LINK_HREF_PREFIX",
    "LINK_SCHEME",
    "MAX_CACHE_ENTRIES",
    "MAX_CACHE_SIZE_BYTES",
    "NOTE_SUFFIX",
]

# Render cache bounds
MAX_CACHE_ENTRIES = 100
MAX_CACHE_SIZE_BYTES = 50 * 1024 * 1024

# Recursion ceiling for nested embeds
DEFAULT_MAX_DEPTH = 5

# App-internal link scheme
LINK_SCHEME = "app://open?path="
LINK_HREF_PREFIX = f'href="{LINK_SCHEME}'

NOTE_SUFFIX = ".md"

# Embeds of these resolve to an asset link instead of inlined content
ASSET_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "svg", "pdf"})
