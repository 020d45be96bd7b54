"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import TypeVar

import click

from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format from the active Typer/Click context, defaulting to yaml."""
    context: click.Context | None = click.get_current_context(silent=True)
    current = context
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def handle_stage_result(func: F, result_printer: Callable[[dict], None] | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (drive the callback, print each step to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)

    Exits with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        display_format = _extract_display_format()

        result = func(*args, **kwargs)
        display.status(result.announce)

        for progress_percent, message in result.progress_callback(result):
            display.info(f"[dim]Progress: {message} ({progress_percent:.1%})[/dim]")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")
        if not result.output:
            raise ValueError("progress_callback must set result.output to a non-empty dict")

        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)
        for warning in result.output.get("warnings", []):
            display.warning(warning)

        if result_printer:
            result_printer(result.output)
        else:
            display.json_output(result.output, format=display_format)

        sys.exit(0 if result.success else 1)

    return wrapper  # type: ignore[return-value]
