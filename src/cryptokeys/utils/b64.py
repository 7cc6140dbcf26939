from __future__ import annotations

import base64
import re

_WHITESPACE = re.compile(r"\s+")


def b64e(data: bytes) -> str:
    """Standard base64 encode with padding"""
    return base64.b64encode(data).decode("ascii")


def b64d(value: str) -> bytes:
    """Standard base64 decode that tolerates whitespace and missing padding

    Raises ``ValueError`` for characters outside the base64 alphabet.
    """
    compact = _WHITESPACE.sub("", value)
    pad = "=" * (-len(compact) % 4)
    return base64.b64decode((compact + pad).encode("ascii"), validate=True)


__all__ = ["b64d", "b64e"]
