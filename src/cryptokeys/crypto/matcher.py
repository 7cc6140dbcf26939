"""Check that two keys form a pair by round-tripping a fixed probe message."""
from __future__ import annotations

from typing import Protocol

from ..exceptions import CipherFailure

PROBE = b"Moky loves May Lee forever!"


class SignKey(Protocol):
    def sign(self, data: bytes) -> bytes: ...


class VerifyKey(Protocol):
    def verify(self, data: bytes, signature: bytes) -> bool: ...


class EncryptKey(Protocol):
    def encrypt(self, plaintext: bytes) -> bytes: ...


class DecryptKey(Protocol):
    def decrypt(self, ciphertext: bytes) -> bytes: ...


def match_asymmetric(sign_key: SignKey, verify_key: VerifyKey) -> bool:
    signature = sign_key.sign(PROBE)
    return verify_key.verify(PROBE, signature)


def match_encryption(encrypt_key: EncryptKey, decrypt_key: DecryptKey) -> bool:
    ciphertext = encrypt_key.encrypt(PROBE)
    try:
        plaintext = decrypt_key.decrypt(ciphertext)
    except CipherFailure:
        return False
    return plaintext == PROBE


def match_symmetric(encrypt_key: EncryptKey, decrypt_key: DecryptKey) -> bool:
    return match_encryption(encrypt_key, decrypt_key)


__all__ = [
    "DecryptKey",
    "EncryptKey",
    "PROBE",
    "SignKey",
    "VerifyKey",
    "match_asymmetric",
    "match_encryption",
    "match_symmetric",
]
