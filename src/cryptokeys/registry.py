"""Algorithm registry mapping algorithm names to key constructors."""
from __future__ import annotations

from typing import Any, Dict, Generic, Iterator, Mapping, Optional, TypeVar

from .exceptions import UnknownAlgorithm
from .models import KeyDescriptor

C = TypeVar("C")

WILDCARD = "*"


def algorithm_of(descriptor: Any) -> Optional[str]:
    if isinstance(descriptor, KeyDescriptor):
        return descriptor.algorithm
    if isinstance(descriptor, Mapping):
        value = descriptor.get("algorithm")
        return value if isinstance(value, str) else None
    return None


class AlgorithmRegistry(Generic[C]):
    """Runtime registry of key constructors keyed by algorithm name.

    Several aliases may point at the same constructor. Registration happens
    during start-up; afterwards the registry is only read.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._constructors: Dict[str, C] = {}

    def register(self, name: str, constructor: C) -> None:
        self._constructors[name] = constructor

    def get(self, name: str) -> Optional[C]:
        return self._constructors.get(name)

    def resolve(self, descriptor: Any, default: Optional[str] = None) -> C:
        """Return the constructor for ``descriptor['algorithm']``.

        Falls back to ``default`` when the algorithm is absent or unknown,
        then to the ``*`` entry.
        """
        algorithm = algorithm_of(descriptor)
        for candidate in (algorithm, default, WILDCARD):
            if candidate is None:
                continue
            constructor = self._constructors.get(candidate)
            if constructor is not None:
                return constructor
        raise UnknownAlgorithm(algorithm)

    def names(self) -> list[str]:
        return list(self._constructors)

    def __contains__(self, name: object) -> bool:
        return name in self._constructors

    def __iter__(self) -> Iterator[str]:
        return iter(self._constructors)

    def __len__(self) -> int:
        return len(self._constructors)

    def __repr__(self) -> str:
        return f"AlgorithmRegistry(kind={self.kind!r}, names={self.names()!r})"


__all__ = ["AlgorithmRegistry", "WILDCARD", "algorithm_of"]
