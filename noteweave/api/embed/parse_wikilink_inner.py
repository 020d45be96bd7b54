"""Wikilink inner-text parser (UNO: single function)."""

from .ParsedLink import ParsedLink
from .Subtarget import Block, Heading, Subtarget


def _normalize_target(raw: str) -> str:
    return raw.replace("\\", "/").strip()


def parse_wikilink_inner(inner: str) -> ParsedLink:
    """Split the text between ``[[`` and ``]]`` into target, subtarget and alias.

    The last ``|`` separates the alias. In what remains, the first ``#``
    starts a heading subtarget and the first ``^`` a block subtarget,
    whichever comes first.

    Examples:
        >>> parse_wikilink_inner("Note#H|Alias")
        ParsedLink(target='Note', subtarget=Heading(text='H'), alias='Alias')
        >>> parse_wikilink_inner("a\\\\b/Note")
        ParsedLink(target='a/b/Note', subtarget=None, alias=None)
    """
    inner = inner.strip()
    alias: str | None = None
    before_alias, sep, after_alias = inner.rpartition("|")
    if sep:
        alias = after_alias.strip()
        rest = before_alias.strip()
    else:
        rest = inner

    sharp = rest.find("#")
    caret = rest.find("^")
    subtarget: Subtarget | None = None
    if sharp != -1 and (caret == -1 or sharp <= caret):
        subtarget = Heading(rest[sharp + 1 :].strip())
        rest = rest[:sharp]
    elif caret != -1:
        subtarget = Block(rest[caret + 1 :].strip())
        rest = rest[:caret]

    return ParsedLink(target=_normalize_target(rest), subtarget=subtarget, alias=alias)
