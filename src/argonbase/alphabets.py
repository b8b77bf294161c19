"""Built-in alphabet sources, in the same LF-delimited form as alphabet files."""

from __future__ import annotations

from typing import Dict, Final

BASE94: Final[str] = "".join(chr(c) for c in range(0x21, 0x7F))
BASE58: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
HEX: Final[str] = "0123456789abcdef"
BINARY: Final[str] = "01"


def _lines(chars: str) -> bytes:
    return "\n".join(chars).encode("utf-8") + b"\n"


PRESETS: Final[Dict[str, bytes]] = {
    "base94": _lines(BASE94),
    "base58": _lines(BASE58),
    "hex": _lines(HEX),
    "binary": _lines(BINARY),
}


def preset(name: str) -> bytes:
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown alphabet preset {name!r}; choose one of: {', '.join(sorted(PRESETS))}") from None
