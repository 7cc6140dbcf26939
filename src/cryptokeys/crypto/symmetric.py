"""AES key: CBC mode with PKCS#7 padding.

Descriptor::

    {
        "algorithm": "AES",
        "keySize": 32,           # optional, bytes
        "blockSize": 16,         # optional, defaults to the cipher block size
        "data": "{BASE64}",      # key bytes
        "iv": "{BASE64}"         # initialization vector
    }
"""
from __future__ import annotations

import os
from typing import Any, Optional, TYPE_CHECKING

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..exceptions import CipherFailure, CipherFailureCause, FormatError
from ..keys import SymmetricKey
from ..logging import get_logger
from ..utils.b64 import b64d, b64e

if TYPE_CHECKING:
    from ..factory import KeyFactory

_log = get_logger("cryptokeys.aes")

AES = "AES"
AES_CBC_PKCS7 = "AES/CBC/PKCS7Padding"
AES_BLOCK_SIZE = algorithms.AES.block_size // 8


def random_bytes(size: int) -> bytes:
    return os.urandom(size)


def _decode_field(name: str, value: str) -> bytes:
    try:
        return b64d(value)
    except ValueError as exc:
        raise FormatError(f"AES key field '{name}' is not valid base64") from exc


class AESKey(SymmetricKey):
    """AES-CBC key bound to a fixed key and IV.

    A descriptor without ``data`` gets fresh random key bytes and a random IV.
    A descriptor with ``data`` but no ``iv`` gets an all-zero IV; existing
    stored keys depend on this, so it is kept although a fixed IV leaks
    equality of plaintext prefixes.
    """

    def __init__(self, descriptor: Any, *, factory: Optional["KeyFactory"] = None) -> None:
        super().__init__(descriptor, factory=factory)
        key = self.data
        iv = self.iv
        try:
            self._cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
        except ValueError as exc:
            raise CipherFailure(
                f"AES engine rejected key ({len(key)} bytes) or IV ({len(iv)} bytes)",
                CipherFailureCause.INVALID_KEY,
            ) from exc
        self._padding = padding.PKCS7(algorithms.AES.block_size)

    @property
    def key_size(self) -> int:
        size = self._descriptor.key_size
        return size if size is not None else self._config.symmetric.key_size

    @property
    def block_size(self) -> int:
        size = self._descriptor.block_size
        return size if size is not None else AES_BLOCK_SIZE

    @property
    def data(self) -> bytes:
        encoded = self._descriptor.data
        if encoded is None:
            encoded = self._descriptor.extensions.get("D")
        if encoded is not None:
            return _decode_field("data", encoded)
        # new key: random key bytes and random IV together
        key_size = self._descriptor.materialize("key_size", lambda: self._config.symmetric.key_size)
        key = random_bytes(key_size)
        self._descriptor.materialize("data", lambda: b64e(key))
        self._descriptor.materialize("iv", lambda: b64e(random_bytes(self.block_size)))
        _log.info("aes.generated", algorithm=self.algorithm, key_size=key_size)
        return key

    @property
    def iv(self) -> bytes:
        encoded = self._descriptor.iv
        if encoded is None:
            encoded = self._descriptor.extensions.get("I")
        if encoded is None:
            encoded = self._descriptor.materialize("iv", lambda: b64e(bytes(self.block_size)))
        return _decode_field("iv", encoded)

    def encrypt(self, plaintext: bytes) -> bytes:
        padder = self._padding.padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = self._cipher.encryptor()
        try:
            return encryptor.update(padded) + encryptor.finalize()
        except ValueError as exc:
            raise CipherFailure(f"AES encryption failed: {exc}") from exc

    def decrypt(self, ciphertext: bytes) -> bytes:
        if not ciphertext or len(ciphertext) % AES_BLOCK_SIZE:
            raise CipherFailure(
                f"AES ciphertext length {len(ciphertext)} is not a multiple of {AES_BLOCK_SIZE}",
                CipherFailureCause.MALFORMED_INPUT,
            )
        decryptor = self._cipher.decryptor()
        try:
            padded = decryptor.update(ciphertext) + decryptor.finalize()
        except ValueError as exc:
            raise CipherFailure(f"AES decryption failed: {exc}") from exc
        unpadder = self._padding.unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise CipherFailure(
                "AES padding check failed (wrong key/IV or corrupted data)",
                CipherFailureCause.BAD_PADDING,
            ) from exc


__all__ = ["AES", "AES_BLOCK_SIZE", "AES_CBC_PKCS7", "AESKey", "random_bytes"]
