"""App-internal link URLs (UNO: single function)."""

from pathlib import Path

from ._constants import LINK_SCHEME

_RESERVED = {
    ord("%"): "%25",
    ord("?"): "%3F",
    ord("#"): "%23",
    ord("&"): "%26",
    ord("="): "%3D",
    ord("+"): "%2B",
    ord(" "): "%20",
    ord('"'): "%22",
    ord("<"): "%3C",
    ord(">"): "%3E",
}


def percent_encode_path(path: str) -> str:
    """Percent-encode a slash path byte-wise; ``/`` and other ASCII graphics pass through."""
    out: list[str] = []
    for byte in path.encode("utf-8"):
        if byte in _RESERVED:
            out.append(_RESERVED[byte])
        elif 0x21 <= byte <= 0x7E:
            out.append(chr(byte))
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def obs_link_href(resolved_path: Path | None) -> str:
    """Build ``app://open?path=...`` for a resolved note; empty path when unresolved."""
    if resolved_path is None:
        return LINK_SCHEME
    return LINK_SCHEME + percent_encode_path(str(resolved_path).replace("\\", "/"))
