from __future__ import annotations

import pytest

from cryptokeys.exceptions import FormatError, UnknownAlgorithm
from cryptokeys.factory import KeyFactory
from cryptokeys.crypto.symmetric import AESKey
from cryptokeys.models import KeyDescriptor
from cryptokeys.registry import WILDCARD, AlgorithmRegistry, algorithm_of


def _registry() -> AlgorithmRegistry[str]:
    registry: AlgorithmRegistry[str] = AlgorithmRegistry("test")
    registry.register("AES", "aes")
    registry.register("AES/CBC/PKCS7Padding", "aes")
    registry.register("RSA", "rsa")
    return registry


def test_aliases_resolve_to_same_constructor() -> None:
    registry = _registry()
    assert registry.resolve({"algorithm": "AES"}) == "aes"
    assert registry.resolve({"algorithm": "AES/CBC/PKCS7Padding"}) == "aes"
    assert registry.names() == ["AES", "AES/CBC/PKCS7Padding", "RSA"]
    assert "RSA" in registry
    assert len(registry) == 3


def test_last_registration_wins() -> None:
    registry = _registry()
    registry.register("RSA", "rsa-v2")
    assert registry.get("RSA") == "rsa-v2"


def test_unknown_algorithm_reports_name() -> None:
    with pytest.raises(UnknownAlgorithm) as excinfo:
        _registry().resolve({"algorithm": "DES"})
    assert excinfo.value.algorithm == "DES"


def test_default_used_for_absent_or_unknown_algorithm() -> None:
    registry = _registry()
    assert registry.resolve({}, default="RSA") == "rsa"
    assert registry.resolve({"algorithm": "DES"}, default="AES") == "aes"


def test_wildcard_catches_everything_else() -> None:
    registry = _registry()
    registry.register(WILDCARD, "fallback")
    assert registry.resolve({"algorithm": "DES"}) == "fallback"
    assert registry.resolve({"algorithm": "RSA"}) == "rsa"


def test_algorithm_of_accepts_models_and_mappings() -> None:
    assert algorithm_of(KeyDescriptor.coerce({"algorithm": "AES"})) == "AES"
    assert algorithm_of({"algorithm": 5}) is None
    assert algorithm_of("AES") is None


def test_default_factory_registrations(factory: KeyFactory) -> None:
    assert set(factory.symmetric_keys) == {"AES", "AES/CBC/PKCS7Padding"}
    assert set(factory.private_keys) == {"RSA", "SHA256withRSA", "RSA/ECB/PKCS1Padding"}
    assert set(factory.public_keys) == set(factory.private_keys)


def test_parse_none_and_passthrough(factory: KeyFactory) -> None:
    assert factory.parse_symmetric_key(None) is None
    key = factory.generate_symmetric_key("AES")
    assert factory.parse_symmetric_key(key) is key


def test_parse_fills_in_default_algorithm(factory: KeyFactory) -> None:
    key = factory.parse_symmetric_key({"data": "AAECAwQFBgcICQoLDA0ODw=="}, default="AES")
    assert isinstance(key, AESKey)
    assert key.algorithm == "AES"


def test_parse_accepts_json_text(factory: KeyFactory) -> None:
    original = factory.generate_symmetric_key("AES")
    parsed = factory.parse_symmetric_key(original.to_json())
    assert parsed is not None
    assert parsed.to_dict() == original.to_dict()


@pytest.mark.parametrize("value", ["not json", b"[1, 2]", 12])
def test_parse_rejects_unusable_input(factory: KeyFactory, value: object) -> None:
    with pytest.raises(FormatError):
        factory.parse_private_key(value)


def test_parse_unknown_algorithm(factory: KeyFactory) -> None:
    with pytest.raises(UnknownAlgorithm):
        factory.parse_public_key({"algorithm": "ECC", "data": "..."})


def test_custom_registration_on_private_factory() -> None:
    factory = KeyFactory()
    factory.register_symmetric_key(WILDCARD, AESKey)
    key = factory.generate_symmetric_key("Twofish")
    assert isinstance(key, AESKey)
    assert key.algorithm == "Twofish"
