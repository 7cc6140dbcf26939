"""Central exception hierarchy"""
from __future__ import annotations

from enum import Enum


class CryptoKeyError(Exception):
    """Base exception for all key failures"""


class UnknownAlgorithm(CryptoKeyError):
    """Raised when no registered constructor matches a descriptor"""

    def __init__(self, algorithm: str | None) -> None:
        super().__init__(f"Unknown key algorithm: {algorithm!r}")
        self.algorithm = algorithm


class MissingField(CryptoKeyError):
    """Raised when a required descriptor field is absent"""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"Descriptor field missing: {field}")
        self.field = field


class FormatError(CryptoKeyError):
    """Raised for malformed PEM frames or undecodable key structures"""


class InvalidInputLength(CryptoKeyError):
    """Raised when plaintext or ciphertext violates the algorithm's size contract"""

    def __init__(self, message: str, *, length: int, limit: int) -> None:
        super().__init__(message)
        self.length = length
        self.limit = limit


class UnsupportedOperation(CryptoKeyError):
    """Raised when an operation needs key material the object does not hold"""


class CipherFailureCause(str, Enum):
    INVALID_KEY = "invalid_key"
    BAD_PADDING = "bad_padding"
    MALFORMED_INPUT = "malformed_input"
    ENGINE = "engine"


class CipherFailure(CryptoKeyError):
    """Raised when the cipher engine rejects an operation"""

    def __init__(self, message: str, cause: CipherFailureCause = CipherFailureCause.ENGINE) -> None:
        super().__init__(message)
        self.cause = cause

    @property
    def is_key_mismatch(self) -> bool:
        """True when the failure points at the key or IV rather than the input"""
        return self.cause in (CipherFailureCause.INVALID_KEY, CipherFailureCause.BAD_PADDING)


__all__ = [
    "CryptoKeyError",
    "UnknownAlgorithm",
    "MissingField",
    "FormatError",
    "InvalidInputLength",
    "UnsupportedOperation",
    "CipherFailureCause",
    "CipherFailure",
]
