"""Link target resolver (UNO: single function)."""

from pathlib import Path

from ._constants import ASSET_EXTENSIONS, NOTE_SUFFIX
from .normalize_rel_key import normalize_rel_key
from .ParsedLink import ParsedLink
from .ResolveResult import NotFound, Placeholder, Resolved, ResolveResult
from .VaultIndex import VaultIndex


def _classify(path: Path) -> ResolveResult:
    extension = path.suffix[1:].lower()
    if extension in ASSET_EXTENSIONS:
        return Placeholder(path)
    return Resolved(path)


def resolve_target(parsed: ParsedLink, index: VaultIndex) -> ResolveResult:
    """Resolve a parsed link against the vault index.

    Targets containing ``/`` are vault-relative paths and must match exactly
    (optionally after appending ``.md``). Bare names are looked up by
    basename; when several notes share it the first sorted path wins.

    Args:
        parsed: Output of parse_wikilink_inner
        index: Vault index built for the current vault

    Returns:
        Resolved, Placeholder or NotFound
    """
    target = normalize_rel_key(parsed.target.strip())
    if not target:
        return NotFound()

    if "/" in target:
        found = index.by_rel_path.get(target)
        if found is None and not target.endswith(NOTE_SUFFIX):
            found = index.by_rel_path.get(target + NOTE_SUFFIX)
        return NotFound() if found is None else _classify(found)

    if target.endswith(NOTE_SUFFIX):
        target = target[: -len(NOTE_SUFFIX)]
    paths = index.by_basename.get(target)
    if not paths:
        return NotFound()
    return _classify(paths[0])
