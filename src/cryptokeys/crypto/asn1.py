"""Conversions between the RSA key layouts.

raw      PKCS#1 ``RSAPublicKey`` / ``RSAPrivateKey``
wrapped  X.509 ``SubjectPublicKeyInfo`` (public) and PKCS#8 ``PrivateKeyInfo``
         (private), i.e. the raw structure behind an algorithm identifier

All inputs and outputs are DER bytes. Structure parsing and encoding is done
by ``cryptography``; every parse failure is reported as ``FormatError``.
"""
from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..exceptions import FormatError

_DER = serialization.Encoding.DER
_PKCS1_PUBLIC_FRAME = "RSA PUBLIC KEY"


def load_public(der: bytes) -> rsa.RSAPublicKey:
    """Load an RSA public key from either the wrapped or the raw layout."""
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, TypeError, UnsupportedAlgorithm):
        key = _load_pkcs1_public(der)
    if not isinstance(key, rsa.RSAPublicKey):
        raise FormatError(f"Expected an RSA public key, got {type(key).__name__}")
    return key


def load_private(der: bytes) -> rsa.RSAPrivateKey:
    """Load an RSA private key from either the wrapped or the raw layout."""
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise FormatError("Key data is neither PKCS#1 nor PKCS#8 private key DER") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise FormatError(f"Expected an RSA private key, got {type(key).__name__}")
    return key


def _load_pkcs1_public(der: bytes) -> rsa.RSAPublicKey:
    # cryptography only exposes the bare PKCS#1 public layout through its PEM loader
    from .pem import armor

    try:
        key = serialization.load_pem_public_key(armor(der, _PKCS1_PUBLIC_FRAME).encode("ascii"))
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise FormatError("Key data is neither X.509 nor PKCS#1 public key DER") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise FormatError(f"Expected an RSA public key, got {type(key).__name__}")
    return key


def public_raw(key: rsa.RSAPublicKey) -> bytes:
    return key.public_bytes(_DER, serialization.PublicFormat.PKCS1)


def public_wrapped(key: rsa.RSAPublicKey) -> bytes:
    return key.public_bytes(_DER, serialization.PublicFormat.SubjectPublicKeyInfo)


def private_raw(key: rsa.RSAPrivateKey) -> bytes:
    return key.private_bytes(
        _DER,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    )


def private_wrapped(key: rsa.RSAPrivateKey) -> bytes:
    return key.private_bytes(
        _DER,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


# ---------- transcoding ----------
def raw_to_wrapped_public(raw: bytes) -> bytes:
    return public_wrapped(_load_pkcs1_public(raw))


def wrapped_to_raw_public(wrapped: bytes) -> bytes:
    return public_raw(load_public(wrapped))


def raw_to_wrapped_private(raw: bytes) -> bytes:
    return private_wrapped(load_private(raw))


def wrapped_to_raw_private(wrapped: bytes) -> bytes:
    return private_raw(load_private(wrapped))


def derive_public_from_private_raw(raw_private: bytes) -> bytes:
    """Extract modulus and public exponent from a raw private structure."""
    numbers = load_private(raw_private).private_numbers().public_numbers
    return public_raw(numbers.public_key())


def public_to_raw(der: bytes) -> bytes:
    """Normalize public key DER of either layout to the raw layout."""
    return public_raw(load_public(der))


def private_to_raw(der: bytes) -> bytes:
    """Normalize private key DER of either layout to the raw layout."""
    return private_raw(load_private(der))


__all__ = [
    "derive_public_from_private_raw",
    "load_private",
    "load_public",
    "private_raw",
    "private_to_raw",
    "private_wrapped",
    "public_raw",
    "public_to_raw",
    "public_wrapped",
    "raw_to_wrapped_private",
    "raw_to_wrapped_public",
    "wrapped_to_raw_private",
    "wrapped_to_raw_public",
]
