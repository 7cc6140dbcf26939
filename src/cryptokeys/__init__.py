"""Algorithm-tagged key descriptors, pluggable key registries and RSA key format transcoding."""
from .config import AppConfig, load_config
from .crypto import AESKey, RSAPrivateKey, RSAPublicKey, match_asymmetric, match_symmetric
from .exceptions import (
    CipherFailure,
    CipherFailureCause,
    CryptoKeyError,
    FormatError,
    InvalidInputLength,
    MissingField,
    UnknownAlgorithm,
    UnsupportedOperation,
)
from .factory import KeyFactory, create_default_factory
from .keys import PrivateKey, PublicKey, SymmetricKey
from .models import AsymmetricKeyDescriptor, KeyDescriptor, SymmetricKeyDescriptor
from .registry import AlgorithmRegistry
from .version import __version__

__all__ = [
    "AESKey",
    "AlgorithmRegistry",
    "AppConfig",
    "AsymmetricKeyDescriptor",
    "CipherFailure",
    "CipherFailureCause",
    "CryptoKeyError",
    "FormatError",
    "InvalidInputLength",
    "KeyDescriptor",
    "KeyFactory",
    "MissingField",
    "PrivateKey",
    "PublicKey",
    "RSAPrivateKey",
    "RSAPublicKey",
    "SymmetricKey",
    "SymmetricKeyDescriptor",
    "UnknownAlgorithm",
    "UnsupportedOperation",
    "__version__",
    "create_default_factory",
    "load_config",
    "match_asymmetric",
    "match_symmetric",
]
