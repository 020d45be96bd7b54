"""Display text for rendered wikilinks (UNO: single function)."""

from ._constants import NOTE_SUFFIX
from .ParsedLink import ParsedLink


def link_display_text(parsed: ParsedLink) -> str:
    """Alias when present, else the target basename without ``.md`` plus any subtarget."""
    if parsed.alias:
        return parsed.alias
    base = parsed.target.strip().rsplit("/", 1)[-1]
    while base.endswith(NOTE_SUFFIX):
        base = base[: -len(NOTE_SUFFIX)]
    if parsed.subtarget is not None:
        return f"{base}{parsed.subtarget.suffix()}"
    return base
