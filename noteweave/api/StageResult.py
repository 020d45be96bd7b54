"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    1. ``announce`` is shown before any work starts.
    2. ``progress_callback`` does the work, yielding ``(fraction, message)``
       and filling in the remaining fields.
    3. ``result`` is the one-line summary.
    4. ``output`` is the structured payload printed as JSON or YAML.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
