"""AES and RSA key implementations, key layout transcoding and pair matching."""
from .asn1 import (
    derive_public_from_private_raw,
    raw_to_wrapped_private,
    raw_to_wrapped_public,
    wrapped_to_raw_private,
    wrapped_to_raw_public,
)
from .asymmetric import RSAPrivateKey, RSAPublicKey
from .matcher import PROBE, match_asymmetric, match_encryption, match_symmetric
from .pem import armor, dearmor, decode_key_text
from .symmetric import AESKey

__all__ = [
    "AESKey",
    "PROBE",
    "RSAPrivateKey",
    "RSAPublicKey",
    "armor",
    "dearmor",
    "decode_key_text",
    "derive_public_from_private_raw",
    "match_asymmetric",
    "match_encryption",
    "match_symmetric",
    "raw_to_wrapped_private",
    "raw_to_wrapped_public",
    "wrapped_to_raw_private",
    "wrapped_to_raw_public",
]
