"""Get noteweave home directory path or path under it."""

import os
from pathlib import Path

from ...constants import NOTEWEAVE_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get noteweave home directory path or path under it.

    Checks the NOTEWEAVE_HOME environment variable first and defaults to
    ``~/.noteweave``.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.noteweave")
        >>> get_home_dir("config.json")
        Path("/Users/user/.noteweave/config.json")
    """
    home_env = os.environ.get("NOTEWEAVE_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / NOTEWEAVE_HOME_EXT
    return home / Path(*parts) if parts else home
