"""Vault index API command.

CLI: noteweave vault index
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import VaultIndexOutput


def cmd_index() -> StageResult:
    """Build the vault index and report notes sharing a basename."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NoteweaveConfig import NoteweaveConfig
        from ..embed.VaultIndex import VaultIndex
        from ..embed.VaultIndexError import VaultIndexError

        yield (0.2, "Loading configuration...")
        try:
            config = NoteweaveConfig.load()
            vault_path = config.vault.base_dir
            yield (0.5, "Walking vault...")
            index = VaultIndex.build_index(vault_path)
        except (ValueError, VaultIndexError) as e:
            result_obj.output = VaultIndexOutput(
                errors=[str(e)],
                warnings=[],
                vault_path="",
                note_count=0,
                ambiguous={},
                success=False,
            ).model_dump(mode="python")
            result_obj.result = f"Vault index failed: {e}"
            result_obj.success = False
            return

        ambiguous = {name: [str(p) for p in paths] for name, paths in index.ambiguous_basenames().items()}
        warnings = [f"'{name}' matches {len(paths)} notes; links use {paths[0]}" for name, paths in ambiguous.items()]

        yield (1.0, "Complete")
        result_obj.output = VaultIndexOutput(
            errors=[],
            warnings=warnings,
            vault_path=str(index.root),
            note_count=index.note_count,
            ambiguous=ambiguous,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Indexed {index.note_count} note(s)"
        result_obj.success = True

    return StageResult(
        announce="Indexing vault...",
        progress_callback=do_work,
    )
