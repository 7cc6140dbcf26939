"""Key factory: the three algorithm registries and the parse/generate entry points.

Build one factory at start-up with :func:`create_default_factory`, register any
extra algorithms on it, then pass it to whatever needs to turn descriptors into
keys.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional, TypeVar

from .config import DEFAULT_CONFIG, AppConfig
from .crypto.asymmetric import RSA, RSA_ECB_PKCS1, RSA_SHA256, RSAPrivateKey, RSAPublicKey
from .crypto.symmetric import AES, AES_CBC_PKCS7, AESKey
from .exceptions import FormatError
from .keys import CryptographyKey, PrivateKey, PublicKey, SymmetricKey
from .logging import get_logger
from .models import KeyDescriptor
from .registry import AlgorithmRegistry, algorithm_of

_log = get_logger("cryptokeys.factory")

K = TypeVar("K", bound=CryptographyKey)

# constructor(descriptor, factory=...) -> key
SymmetricKeyConstructor = Callable[..., SymmetricKey]
PrivateKeyConstructor = Callable[..., PrivateKey]
PublicKeyConstructor = Callable[..., PublicKey]


class KeyFactory:
    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.symmetric_keys: AlgorithmRegistry[SymmetricKeyConstructor] = AlgorithmRegistry("symmetric")
        self.private_keys: AlgorithmRegistry[PrivateKeyConstructor] = AlgorithmRegistry("private")
        self.public_keys: AlgorithmRegistry[PublicKeyConstructor] = AlgorithmRegistry("public")

    # ---- registration ----
    def register_symmetric_key(self, name: str, constructor: SymmetricKeyConstructor) -> None:
        self.symmetric_keys.register(name, constructor)

    def register_private_key(self, name: str, constructor: PrivateKeyConstructor) -> None:
        self.private_keys.register(name, constructor)

    def register_public_key(self, name: str, constructor: PublicKeyConstructor) -> None:
        self.public_keys.register(name, constructor)

    # ---- generation ----
    def generate_symmetric_key(self, algorithm: str) -> SymmetricKey:
        return self._build(self.symmetric_keys, {"algorithm": algorithm}, None)

    def generate_private_key(self, algorithm: str) -> PrivateKey:
        return self._build(self.private_keys, {"algorithm": algorithm}, None)

    # ---- parsing ----
    def parse_symmetric_key(self, key: Any, default: Optional[str] = None) -> Optional[SymmetricKey]:
        return self._parse(key, SymmetricKey, self.symmetric_keys, default)

    def parse_private_key(self, key: Any, default: Optional[str] = None) -> Optional[PrivateKey]:
        return self._parse(key, PrivateKey, self.private_keys, default)

    def parse_public_key(self, key: Any, default: Optional[str] = None) -> Optional[PublicKey]:
        return self._parse(key, PublicKey, self.public_keys, default)

    def _parse(
        self,
        key: Any,
        kind: type[K],
        registry: AlgorithmRegistry[Any],
        default: Optional[str],
    ) -> Optional[K]:
        if key is None:
            return None
        if isinstance(key, kind):
            return key
        info = _as_mapping(key)
        return self._build(registry, info, default)

    def _build(self, registry: AlgorithmRegistry[Any], info: Mapping[str, Any], default: Optional[str]) -> Any:
        constructor = registry.resolve(info, default)
        if algorithm_of(info) is None and default is not None:
            info = {**info, "algorithm": default}
        _log.debug("factory.resolve", kind=registry.kind, algorithm=algorithm_of(info))
        return constructor(info, factory=self)


def _as_mapping(key: Any) -> Mapping[str, Any]:
    if isinstance(key, KeyDescriptor):
        return key
    if isinstance(key, Mapping):
        return key
    if isinstance(key, CryptographyKey):
        return key.descriptor
    if isinstance(key, (str, bytes)):
        try:
            decoded = json.loads(key)
        except ValueError as exc:
            raise FormatError("Key text is not a JSON descriptor") from exc
        if isinstance(decoded, dict):
            return decoded
    raise FormatError(f"Cannot parse key from {type(key).__name__}")


def create_default_factory(config: Optional[AppConfig] = None) -> KeyFactory:
    """Factory with the built-in AES and RSA algorithms and their aliases."""
    factory = KeyFactory(config)
    for name in (AES, AES_CBC_PKCS7):
        factory.register_symmetric_key(name, AESKey)
    for name in (RSA, RSA_SHA256, RSA_ECB_PKCS1):
        factory.register_private_key(name, RSAPrivateKey)
        factory.register_public_key(name, RSAPublicKey)
    return factory


__all__ = ["KeyFactory", "create_default_factory"]
