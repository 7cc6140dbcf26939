"""PEM armoring for RSA key structures.

Frames look like::

    -----BEGIN PUBLIC KEY-----
    <base64, 76 characters per line, CRLF between lines>
    -----END PUBLIC KEY-----

Several frames may be concatenated in one text, public first. Parsing accepts
``RSA PUBLIC KEY``/``PUBLIC KEY`` and ``RSA PRIVATE KEY``/``PRIVATE KEY``, and
the body may hold either the raw or the wrapped layout whatever the tag says.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from ..exceptions import FormatError
from ..logging import get_logger
from ..utils.b64 import b64d, b64e
from . import asn1

_log = get_logger("cryptokeys.pem")

PUBLIC_TAG = "PUBLIC KEY"
PRIVATE_TAG = "RSA PRIVATE KEY"
LINE_WIDTH = 76
_LINE_SEPARATOR = "\r\n"

KeyKind = Literal["PUBLIC", "PRIVATE"]


@dataclass(slots=True)
class PemKeyMaterial:
    """Raw (PKCS#1) structures recovered from a PEM text"""

    public_raw: Optional[bytes] = None
    private_raw: Optional[bytes] = None

    @property
    def empty(self) -> bool:
        return self.public_raw is None and self.private_raw is None


def armor(blob: bytes, tag: str, line_width: int = LINE_WIDTH) -> str:
    body = b64e(blob)
    lines = [body[i : i + line_width] for i in range(0, len(body), line_width)]
    return f"-----BEGIN {tag}-----\n" + _LINE_SEPARATOR.join(lines) + f"\n-----END {tag}-----"


def _frame_body(text: str, tag: str) -> Optional[str]:
    start_tag = f"-----BEGIN {tag}-----"
    end_tag = f"-----END {tag}-----"
    start = text.find(start_tag)
    if start < 0:
        return None
    start += len(start_tag)
    end = text.find(end_tag, start)
    if end < 0:
        raise FormatError(f"Unterminated PEM frame: missing '{end_tag}'")
    return text[start:end]


def dearmor(text: str, kind: KeyKind) -> Optional[bytes]:
    """Return the decoded body of the ``kind`` frame, or None when absent."""
    body = _frame_body(text, f"RSA {kind} KEY")
    if body is None:
        body = _frame_body(text, f"{kind} KEY")
    if body is None:
        return None
    try:
        return b64d(body)
    except ValueError as exc:
        raise FormatError(f"PEM {kind.lower()} key body is not valid base64") from exc


def decode_key_text(text: str) -> PemKeyMaterial:
    """Recover raw public/private structures from PEM text.

    When only a private section is present the public structure is derived
    from it; if that fails ``public_raw`` stays None.
    """
    material = PemKeyMaterial()
    private_der = dearmor(text, "PRIVATE")
    if private_der is not None:
        material.private_raw = asn1.private_to_raw(private_der)
    public_der = dearmor(text, "PUBLIC")
    if public_der is not None:
        material.public_raw = asn1.public_to_raw(public_der)
    elif material.private_raw is not None:
        try:
            material.public_raw = asn1.derive_public_from_private_raw(material.private_raw)
        except FormatError as exc:
            _log.warning("pem.public_derivation_failed", error=str(exc))
    return material


def encode_public_key(raw: bytes, line_width: int = LINE_WIDTH) -> str:
    """Armor a raw public structure as an X.509 ``PUBLIC KEY`` frame."""
    return armor(asn1.raw_to_wrapped_public(raw), PUBLIC_TAG, line_width)


def encode_private_key(raw: bytes, line_width: int = LINE_WIDTH) -> str:
    """Armor a raw private structure as an ``RSA PRIVATE KEY`` frame."""
    return armor(raw, PRIVATE_TAG, line_width)


__all__ = [
    "LINE_WIDTH",
    "PRIVATE_TAG",
    "PUBLIC_TAG",
    "PemKeyMaterial",
    "armor",
    "dearmor",
    "decode_key_text",
    "encode_private_key",
    "encode_public_key",
]
