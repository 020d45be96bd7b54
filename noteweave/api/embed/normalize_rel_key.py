"""Normalize a vault-relative key (UNO: single function)."""


def normalize_rel_key(rel: str) -> str:
    """Forward slashes, no leading or trailing slash."""
    return rel.replace("\\", "/").strip("/")
