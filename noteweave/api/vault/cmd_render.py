"""Vault render API command.

CLI: noteweave vault render <path> [--output FILE]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import VaultRenderOutput


def cmd_render(path: str, output_path: str | None = None) -> StageResult:
    """Render a note to HTML with wikilinks resolved and embeds expanded.

    Args:
        path: Note to render (absolute, CWD-relative or vault-relative)
        output_path: Optional file to write the HTML to
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.output = VaultRenderOutput(
            errors=[message],
            warnings=[],
            path=path,
            html="",
            output_path=output_path,
            cache={},
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Vault render failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NoteweaveConfig import NoteweaveConfig
        from ..embed.VaultIndexError import VaultIndexError
        from ._resolve_note_path import _resolve_note_path
        from .Vault import Vault

        yield (0.1, "Loading configuration...")
        try:
            config = NoteweaveConfig.load()
        except ValueError as e:
            _fail(result_obj, f"Failed to load config: {e}")
            return

        yield (0.3, "Indexing vault...")
        try:
            vault = Vault(config.vault, render_config=config.render, cache_config=config.cache)
            vault.open()
        except VaultIndexError as e:
            _fail(result_obj, str(e))
            return

        try:
            note = _resolve_note_path(path, vault.vault_path)
            errors: list[str] = []
            html = ""
            if not note.is_file():
                errors.append(f"Note not found: {note}")
            else:
                yield (0.6, "Rendering note...")
                html = vault.render(note)
            stats = vault.cache_stats()
        finally:
            vault.close()

        warnings: list[str] = []
        if output_path and not errors:
            yield (0.9, "Writing output...")
            try:
                Path(output_path).expanduser().write_text(html, encoding="utf-8")
            except OSError as e:
                errors.append(f"Cannot write {output_path}: {e}")

        yield (1.0, "Complete")
        result_obj.output = VaultRenderOutput(
            errors=errors,
            warnings=warnings,
            path=str(note),
            html=html,
            output_path=output_path,
            cache=stats._asdict(),
            success=not errors,
        ).model_dump(mode="python")
        result_obj.result = f"Rendered {note.name}" if not errors else f"Vault render failed: {errors[0]}"
        result_obj.success = not errors

    return StageResult(
        announce=f"Rendering {path}...",
        progress_callback=do_work,
    )
