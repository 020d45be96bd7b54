"""Vault resolve API command.

CLI: noteweave vault resolve <link>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import VaultResolveOutput

_STATUS = {
    "Resolved": "resolved",
    "Placeholder": "placeholder",
    "NotFound": "not_found",
    "Ambiguous": "ambiguous",
}


def cmd_resolve(link: str) -> StageResult:
    """Show what the text inside ``[[...]]`` resolves to.

    Args:
        link: Link text, e.g. ``Folder/Note#Heading|Alias``
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NoteweaveConfig import NoteweaveConfig
        from ..embed.parse_wikilink_inner import parse_wikilink_inner
        from ..embed.VaultIndexError import VaultIndexError
        from .Vault import Vault

        parsed = parse_wikilink_inner(link)

        def _output(errors: list[str], status: str, resolved_path: str | None) -> dict:
            return VaultResolveOutput(
                errors=errors,
                warnings=[],
                link=link,
                target=parsed.target,
                subtarget=parsed.subtarget.suffix() if parsed.subtarget else None,
                alias=parsed.alias,
                status=status,
                resolved_path=resolved_path,
                success=not errors,
            ).model_dump(mode="python")

        yield (0.2, "Loading configuration...")
        try:
            config = NoteweaveConfig.load()
        except ValueError as e:
            result_obj.output = _output([f"Failed to load config: {e}"], "error", None)
            result_obj.result = f"Vault resolve failed: {e}"
            result_obj.success = False
            return

        yield (0.5, "Indexing vault...")
        try:
            with Vault(config.vault) as vault:
                resolved = vault.resolve(link)
        except VaultIndexError as e:
            result_obj.output = _output([str(e)], "error", None)
            result_obj.result = f"Vault resolve failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        status = _STATUS[type(resolved).__name__]
        resolved_path = getattr(resolved, "path", None)
        result_obj.output = _output([], status, str(resolved_path) if resolved_path else None)
        result_obj.result = f"[[{link}]] is {status.replace('_', ' ')}"
        result_obj.success = True

    return StageResult(
        announce=f"Resolving [[{link}]]...",
        progress_callback=do_work,
    )
