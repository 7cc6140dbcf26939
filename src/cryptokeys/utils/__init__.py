from __future__ import annotations

from .b64 import b64d, b64e

__all__ = ["b64d", "b64e"]
