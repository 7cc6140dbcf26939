"""Key descriptors: the serializable form of every key.

A descriptor is the algorithm tag plus algorithm specific fields. Key objects
own their descriptor and fill in missing fields lazily through
:meth:`KeyDescriptor.materialize`, so a descriptor dumped after first use
always carries enough to rebuild the same key.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import FormatError, MissingField
from .logging import get_logger

_log = get_logger("cryptokeys.descriptor")

T = TypeVar("T")
D = TypeVar("D", bound="KeyDescriptor")


class KeyDescriptor(BaseModel):
    """Base descriptor: ``algorithm`` plus optional ``data``.

    Fields the model does not declare are kept in :attr:`extensions` and
    written back unchanged by :meth:`to_dict`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    algorithm: str = Field(frozen=True)
    data: Optional[str] = None

    @property
    def extensions(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    def materialize(self, name: str, produce: Callable[[], T]) -> T:
        """Return field ``name``, producing and caching it when unset."""
        current = getattr(self, name)
        if current is not None:
            return current
        value = produce()
        setattr(self, name, value)
        _log.debug("descriptor.materialized", algorithm=self.algorithm, field=name)
        return value

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def coerce(cls: type[D], value: Any) -> D:
        """Build a descriptor of this kind from a mapping or another descriptor."""
        if isinstance(value, cls):
            return value
        if isinstance(value, KeyDescriptor):
            value = value.to_dict()
        if not isinstance(value, Mapping):
            raise FormatError(f"Key descriptor must be a mapping, got {type(value).__name__}")
        if value.get("algorithm") is None:
            raise MissingField("algorithm")
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            raise FormatError(f"Invalid key descriptor: {exc}") from exc

    @classmethod
    def from_json(cls: type[D], text: str | bytes) -> D:
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise FormatError(f"Invalid key descriptor JSON: {exc}") from exc


class SymmetricKeyDescriptor(KeyDescriptor):
    """``{algorithm, data, iv, keySize, blockSize, mode, padding}``"""

    iv: Optional[str] = None
    key_size: Optional[int] = Field(default=None, alias="keySize")
    block_size: Optional[int] = Field(default=None, alias="blockSize")
    mode: Optional[str] = None
    padding: Optional[str] = None


class AsymmetricKeyDescriptor(KeyDescriptor):
    """``{algorithm, data, keySize, mode, padding, digest}``

    ``data`` is PEM text holding a public section, a private section or both.
    """

    key_size: Optional[int] = Field(default=None, alias="keySize")
    mode: Optional[str] = None
    padding: Optional[str] = None
    digest: Optional[str] = None


__all__ = ["AsymmetricKeyDescriptor", "KeyDescriptor", "SymmetricKeyDescriptor"]
