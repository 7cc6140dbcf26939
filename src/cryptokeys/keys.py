"""Key kinds and their capability sets.

Every key object wraps exactly one descriptor. The closed set of kinds is
:class:`SymmetricKey`, :class:`PrivateKey` and :class:`PublicKey`; operations a
kind cannot perform raise :class:`UnsupportedOperation`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Generic, Optional, TypeVar

from .config import DEFAULT_CONFIG, AppConfig
from .exceptions import UnsupportedOperation
from .models import AsymmetricKeyDescriptor, KeyDescriptor, SymmetricKeyDescriptor

if TYPE_CHECKING:
    from .factory import KeyFactory

D = TypeVar("D", bound=KeyDescriptor)


class CryptographyKey(ABC, Generic[D]):
    descriptor_type: type[KeyDescriptor] = KeyDescriptor

    def __init__(self, descriptor: Any, *, factory: Optional["KeyFactory"] = None) -> None:
        self._descriptor: D = self.descriptor_type.coerce(descriptor)  # type: ignore[assignment]
        self._factory = factory
        self._config: AppConfig = factory.config if factory is not None else DEFAULT_CONFIG

    @property
    def algorithm(self) -> str:
        return self._descriptor.algorithm

    @property
    def descriptor(self) -> D:
        return self._descriptor

    def to_dict(self) -> Dict[str, Any]:
        return self._descriptor.to_dict()

    def to_json(self, *, indent: int | None = None) -> str:
        return self._descriptor.to_json(indent=indent)

    @property
    def has_private_material(self) -> bool:
        return False

    @property
    def has_public_material(self) -> bool:
        return False

    def sign(self, data: bytes) -> bytes:
        raise UnsupportedOperation(f"{self.algorithm} key cannot sign")

    def verify(self, data: bytes, signature: bytes) -> bool:
        raise UnsupportedOperation(f"{self.algorithm} key cannot verify")

    def encrypt(self, plaintext: bytes) -> bytes:
        raise UnsupportedOperation(f"{self.algorithm} key cannot encrypt")

    def decrypt(self, ciphertext: bytes) -> bytes:
        raise UnsupportedOperation(f"{self.algorithm} key cannot decrypt")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self.algorithm!r})"


class SymmetricKey(CryptographyKey[SymmetricKeyDescriptor]):
    descriptor_type = SymmetricKeyDescriptor

    @property
    @abstractmethod
    def data(self) -> bytes:
        """Key bytes"""

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes: ...

    @abstractmethod
    def decrypt(self, ciphertext: bytes) -> bytes: ...

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SymmetricKey):
            return NotImplemented
        if self._descriptor == other._descriptor:
            return True
        from .crypto.matcher import match_symmetric

        return match_symmetric(other, self)

    __hash__ = None  # type: ignore[assignment]


class PublicKey(CryptographyKey[AsymmetricKeyDescriptor]):
    descriptor_type = AsymmetricKeyDescriptor

    @property
    def has_public_material(self) -> bool:
        return True

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool: ...

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes: ...

    def matches(self, private_key: Optional["PrivateKey"]) -> bool:
        """True when ``private_key`` is the private half of this key."""
        if private_key is None or not private_key.has_private_material:
            return False
        from .crypto.matcher import match_asymmetric

        return match_asymmetric(private_key, self)


class PrivateKey(CryptographyKey[AsymmetricKeyDescriptor]):
    descriptor_type = AsymmetricKeyDescriptor

    @property
    def has_private_material(self) -> bool:
        return True

    @abstractmethod
    def sign(self, data: bytes) -> bytes: ...

    @abstractmethod
    def decrypt(self, ciphertext: bytes) -> bytes: ...

    @abstractmethod
    def get_public_key(self) -> PublicKey:
        """Public half as a standalone key; raises UnsupportedOperation if unavailable."""

    @property
    def public_key(self) -> PublicKey:
        return self.get_public_key()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PrivateKey):
            return NotImplemented
        if self._descriptor == other._descriptor:
            return True
        if not (self.has_private_material and other.has_private_material):
            return False
        return self.get_public_key().matches(other)

    __hash__ = None  # type: ignore[assignment]


__all__ = ["CryptographyKey", "PrivateKey", "PublicKey", "SymmetricKey"]
