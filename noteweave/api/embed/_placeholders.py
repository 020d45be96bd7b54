"""Inline placeholder text for references that cannot be expanded."""

from pathlib import Path

INVALID_PATH = "*[Embed: invalid path]*"
READ_ERROR = "*[Embed: read error]*"


def not_found(target: str) -> str:
    return f"*[Embed: {target} (not found)]*"


def ambiguous(target: str) -> str:
    return f"*[Embed: {target} (ambiguous)]*"


def cycle(name: str) -> str:
    return f"*[Embed: {name} (cycle)]*"


def depth_limit(name: str) -> str:
    return f"*[Embed: {name} (depth limit)]*"


def asset_link(path: Path) -> str:
    name = path.name or "asset"
    href = str(path).replace("\\", "/").lstrip("/")
    return f"[Asset: {name}](file:///{href})"
