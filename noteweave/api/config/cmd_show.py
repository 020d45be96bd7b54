"""Show configuration command.

CLI: noteweave config show [section]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigShowOutput
from .NoteweaveConfig import NoteweaveConfig


def cmd_show(section: str = "") -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = NoteweaveConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Config show failed: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=str(NoteweaveConfig.get_config_path()),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())

        if section == "":
            content: dict = {"sections": available_sections}
            errors: list[str] = []
            result_obj.result = f"Found {len(available_sections)} section(s)"
        elif section not in available_sections:
            content = {}
            errors = [f"Unknown section: {section}"]
            result_obj.result = f"Section '{section}' not found"
        else:
            content = config_dict[section]
            errors = []
            result_obj.result = f"Retrieved configuration for '{section}'"

        yield (1.0, "Complete")
        result_obj.output = ConfigShowOutput(
            errors=errors,
            warnings=[],
            section=section,
            content=content,
            config_path=str(config.path),
        ).model_dump(mode="python")
        result_obj.success = not errors

    announce = (
        "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    )
    return StageResult(announce=announce, progress_callback=do_work)
